"""
Parser for the gateway's line-oriented response format.

A successful response body holds one record per line, each line being a
URL-encoded query string:

    phone=79001234567&id=7ef98495-597c-4a99-8030-a58e7e9d1f13
    phone=79001234568&id=dc8e4e83-82a5-4d0f-accc-c320a6759850

The format is lenient: malformed lines yield whatever pairs can be read and
parsing never raises.
"""

import re
from typing import Dict, List
from urllib.parse import parse_qsl

import requests
from loguru import logger


# CRLF, LF and lone CR all separate lines
LINE_SEPARATOR = re.compile(r"\r\n|\r|\n")


def parse_line(line: str) -> Dict[str, str]:
    """
    Parse one ``key=value&key=value`` line.

    Keys and values are URL-decoded (``+`` is a space). A key without ``=``
    gets an empty value, pairs with an empty key are dropped and on
    duplicate keys the last one wins.

    Examples:
        >>> parse_line("phone=79001234567&id=abc-1&err_msg=")
        {'phone': '79001234567', 'id': 'abc-1', 'err_msg': ''}
    """
    return {
        key: value
        for key, value in parse_qsl(line, keep_blank_values=True, errors="replace")
        if key
    }


def parse_response(body: str) -> List[Dict[str, str]]:
    """
    Parse a response body into records.

    Args:
        body: Response body text

    Returns:
        One mapping per non-blank line, in line order
    """
    if not body:
        return []

    records = [
        parse_line(line)
        for line in LINE_SEPARATOR.split(body)
        if line.strip()
    ]

    logger.debug(f"Parsed {len(records)} record(s) from response body")
    return records


def decode_body(response: requests.Response) -> str:
    """
    Decode a response body to text.

    Uses the charset declared in Content-Type, otherwise UTF-8. Undecodable
    bytes are replaced instead of failing.
    """
    content = response.content or b""
    content_type = response.headers.get("Content-Type", "")
    encoding = "utf-8"
    if "charset=" in content_type.lower() and response.encoding:
        encoding = response.encoding

    try:
        return content.decode(encoding, errors="replace")
    except LookupError:
        logger.warning(f"Unknown response charset '{encoding}', falling back to UTF-8")
        return content.decode("utf-8", errors="replace")
