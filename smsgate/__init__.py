"""
SMSGATE client library.

Sends SMS messages through an SMSGATE server and checks their delivery
status using the server's query-string HTTP API (``/rest.api?cmd=...``).

Main components:
- Domain: Models, interfaces and exceptions
- Adapters: HTTP transport and request pipeline plugins
- Services: Response parsing
- Client: send / query_status operations

Usage:
    from smsgate import HttpClientFactory, SmsGateClient

    client = SmsGateClient(HttpClientFactory.create("https://192.168.0.1:8080", "SMS", "123"))
    result = client.send(["79001234567", "79001234568"], "Test message")

    print(result)
"""

from smsgate.client import SmsGateClient
from smsgate.config import GatewaySettings
from smsgate.pipeline import HttpClientFactory, RequestPipeline
from smsgate.domain.models import (
    Credentials,
    Endpoint,
    DeliveryState,
    SentMessage,
    MessageStatus,
)
from smsgate.domain.interfaces import (
    ErrorKind,
    SMSGateError,
    TransportError,
    GatewayError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
)

__all__ = [
    "SmsGateClient",
    "GatewaySettings",
    "HttpClientFactory",
    "RequestPipeline",
    "Credentials",
    "Endpoint",
    "DeliveryState",
    "SentMessage",
    "MessageStatus",
    "ErrorKind",
    "SMSGateError",
    "TransportError",
    "GatewayError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
]

__version__ = "1.0.0"
