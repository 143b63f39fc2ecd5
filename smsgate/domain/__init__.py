"""
SMSGATE Domain Layer.

This module contains the domain models, interfaces and exceptions of the client.
It depends on nothing but the request/response types of the HTTP stack.
"""

from smsgate.domain.models import (
    DEFAULT_API_PATH,
    Credentials,
    Endpoint,
    DeliveryState,
    SentMessage,
    MessageStatus,
    clean_params,
)
from smsgate.domain.interfaces import (
    ITransport,
    IRequestPlugin,
    # Exceptions
    ErrorKind,
    SMSGateError,
    TransportError,
    GatewayError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
)

__all__ = [
    # Models
    "DEFAULT_API_PATH",
    "Credentials",
    "Endpoint",
    "DeliveryState",
    "SentMessage",
    "MessageStatus",
    "clean_params",
    # Interfaces
    "ITransport",
    "IRequestPlugin",
    # Exceptions
    "ErrorKind",
    "SMSGateError",
    "TransportError",
    "GatewayError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
]
