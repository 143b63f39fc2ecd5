"""
Domain models for the SMSGATE client.

This module defines the configuration value objects and the typed records
built from the gateway's line-oriented responses.
All models are immutable (frozen dataclasses).
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional

from loguru import logger


DEFAULT_API_PATH = "/rest.api"
NO_ERROR_CODE = "0x00000000"


class DeliveryState(IntEnum):
    """
    Processing state of an outgoing message (``status`` field of ``cmd=msg``).
    """
    QUEUED = 1
    SENT_TO_DEVICE = 2
    DELIVERED = 3


@dataclass(frozen=True)
class Credentials:
    """
    Gateway account credentials.

    Sent with every request as the ``user`` and ``pswd`` query parameters.
    """
    user: str
    password: str = field(default="", repr=False)

    def as_query(self) -> Dict[str, str]:
        """Return credentials as query parameters."""
        return {"user": self.user, "pswd": self.password}


@dataclass(frozen=True)
class Endpoint:
    """
    Gateway location.

    Attributes:
        host: Scheme, host and optional port (e.g. ``https://192.168.0.1:8080``)
        path: API path, owned entirely by the endpoint
    """
    host: str
    path: str = DEFAULT_API_PATH

    def __post_init__(self) -> None:
        """Validate model after initialization."""
        if not self.host.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint host must include a scheme: {self.host!r}")
        if not self.path.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/': {self.path!r}")

    @property
    def url(self) -> str:
        """Absolute API URL without query string."""
        return self.host.rstrip("/") + self.path


def clean_params(params: Mapping[str, Any]) -> Dict[str, str]:
    """
    Strip absent values and stringify the rest.

    ``None`` and empty strings are dropped. Booleans become ``1``/``0``.
    Zero is a real value and is kept.

    Args:
        params: Parameter name to value mapping

    Returns:
        New ordered mapping ready for URL encoding

    Examples:
        >>> clean_params({"cmd": "send", "charset": None, "text": "", "rep": 0})
        {'cmd': 'send', 'rep': '0'}
    """
    cleaned: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = int(value)
        value = str(value)
        if value == "":
            continue
        cleaned[key] = value
    return cleaned


def _safe_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.warning(f"Could not convert '{value}' to int, using default {default}")
        return default


@dataclass(frozen=True)
class SentMessage:
    """
    One accepted recipient of a ``send`` command.

    Records come back in the same order as the submitted phone numbers.
    """
    phone: str
    id: str
    raw: Dict[str, str] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> "SentMessage":
        return cls(
            phone=record.get("phone", ""),
            id=record.get("id", ""),
            raw=dict(record),
        )


@dataclass(frozen=True)
class MessageStatus:
    """
    Delivery status of an outgoing message (``cmd=msg``).

    Attributes:
        phone: Recipient phone number
        id: Message id assigned by the gateway
        status: Raw processing state (1, 2 or 3; 0 when missing)
        err: Hex result code, ``0x00000000`` on success
        err_msg: Error description, empty on success
        raw: Complete parsed record
    """
    phone: str
    id: str
    status: int
    err: str = ""
    err_msg: str = ""
    raw: Dict[str, str] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> "MessageStatus":
        return cls(
            phone=record.get("phone", ""),
            id=record.get("id", ""),
            status=_safe_int(record.get("status")),
            err=record.get("err", ""),
            err_msg=record.get("err_msg", ""),
            raw=dict(record),
        )

    @property
    def state(self) -> Optional[DeliveryState]:
        """Typed processing state, or None for values the gateway did not document."""
        try:
            return DeliveryState(self.status)
        except ValueError:
            return None

    @property
    def is_error(self) -> bool:
        """True when the gateway reported a non-zero result code."""
        return self.err not in ("", NO_ERROR_CODE)
