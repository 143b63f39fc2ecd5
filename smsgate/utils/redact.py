"""
Helpers that keep credentials out of log lines and error messages.
"""

import re


# pswd=<value> in a query string, raw or URL-encoded separators
_SECRET_PARAM_PATTERN = re.compile(r"(?<![\w])(pswd=)[^&\s'\"]*")


def redact_secrets(text: str) -> str:
    """
    Mask the password query parameter in a URL or message.

    Examples:
        >>> redact_secrets("/rest.api?cmd=msg&user=SMS&pswd=123&id=1")
        '/rest.api?cmd=msg&user=SMS&pswd=***&id=1'
    """
    if not text:
        return text
    return _SECRET_PARAM_PATTERN.sub(r"\1***", text)
