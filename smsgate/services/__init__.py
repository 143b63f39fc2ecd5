"""
SMSGATE Services Layer.
"""

from smsgate.services.response_parser import parse_response, parse_line, decode_body

__all__ = [
    "parse_response",
    "parse_line",
    "decode_body",
]
