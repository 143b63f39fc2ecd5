"""
SMSGATE Adapters Layer.

This module contains the infrastructure implementations of domain interfaces:
the default HTTP transport and the request pipeline plugins.
"""

from smsgate.adapters.requests_transport import RequestsTransport
from smsgate.adapters.plugins import (
    AuthenticationPlugin,
    BaseUriPlugin,
    ErrorPlugin,
)

__all__ = [
    "RequestsTransport",
    "AuthenticationPlugin",
    "BaseUriPlugin",
    "ErrorPlugin",
]
