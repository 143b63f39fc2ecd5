"""
Domain interfaces for the SMSGATE client.

This module defines the abstractions that decouple the client from the HTTP stack:
the transport contract, the request plugin contract and the error taxonomy.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import requests


# ============================================================================
# Custom Exceptions
# ============================================================================


class SMSGateError(Exception):
    """Base exception for SMSGATE client errors."""
    pass


class TransportError(SMSGateError):
    """Exception raised when the request could not be delivered (connection, timeout)."""
    pass


class ErrorKind(str, Enum):
    """Failure categories reported by the gateway through HTTP status codes."""
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


class GatewayError(SMSGateError):
    """
    Exception raised for a failure status returned by the gateway.

    Carries the originating request and the response for diagnostics.

    Attributes:
        message: Human-readable description of the failure
        request: Request that was sent
        response: Response returned by the gateway
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        request: Optional[requests.Request] = None,
        response: Optional[requests.Response] = None,
    ):
        self.message = message
        self.request = request
        self.response = response
        detail = f"HTTP {self.status_code}" if self.status_code is not None else "no response"
        if self.reason:
            detail = f"{detail}: {self.reason}"
        super().__init__(f"{message} ({detail})")

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def reason(self) -> str:
        """Plain-text reason from the response body, trimmed."""
        if self.response is None or not self.response.content:
            return ""
        return self.response.text.strip()[:200]


class BadRequestError(GatewayError):
    """Exception for HTTP 400: malformed or missing required parameters."""
    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(GatewayError):
    """Exception for HTTP 401: invalid username or password."""
    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(GatewayError):
    """Exception for HTTP 404: message id not found for the given user."""
    kind = ErrorKind.NOT_FOUND


# ============================================================================
# HTTP Interfaces
# ============================================================================


class ITransport(ABC):
    """
    Interface for anything that sends one HTTP request and returns one response.

    Implementations handle connections, TLS and timeouts. Connection-level
    failures must surface as TransportError.
    """

    @abstractmethod
    def send(self, request: requests.Request) -> requests.Response:
        """
        Send a single request.

        Args:
            request: Unprepared request

        Returns:
            Response from the server, whatever its status code

        Raises:
            TransportError: If no response could be obtained
        """
        pass


class IRequestPlugin(ABC):
    """
    Interface for a request pipeline plugin.

    Both hooks default to pass-through so a plugin only overrides the side
    it cares about.
    """

    def transform_request(self, request: requests.Request) -> requests.Request:
        """Adjust an outgoing request before it reaches the transport."""
        return request

    def inspect_response(
        self,
        request: requests.Request,
        response: requests.Response,
    ) -> requests.Response:
        """Inspect a response on its way back; may raise."""
        return response
