"""
Requests-based transport.

Implements ITransport on top of a ``requests.Session``.
Connection pooling, TLS verification and proxies are left to the session;
this adapter only resolves relative URLs, applies the timeout and converts
library failures into TransportError.
"""

from typing import Optional
from urllib.parse import urljoin, urlsplit

import requests
from loguru import logger

from smsgate.domain.interfaces import ITransport, TransportError
from smsgate.utils.redact import redact_secrets


class RequestsTransport(ITransport):
    """
    Transport that sends requests with a ``requests.Session``.

    Attributes:
        base_url: Base used for relative request URLs (optional)
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: float = 30,
    ):
        """
        Initialize transport.

        Args:
            session: Session to reuse (a new one is created by default)
            base_url: Base for relative URLs when no endpoint plugin is used
            timeout: Request timeout in seconds
        """
        self._session = session or requests.Session()
        self.base_url = base_url
        self.timeout = timeout

    def send(self, request: requests.Request) -> requests.Response:
        """
        Prepare and send a request.

        Args:
            request: Unprepared request; its URL may be relative

        Returns:
            Response object, whatever its status code

        Raises:
            TransportError: If the URL cannot be resolved or the request fails
        """
        request.url = self._resolve_url(request.url)

        try:
            prepared = self._session.prepare_request(request)
            settings = self._session.merge_environment_settings(
                prepared.url, {}, None, None, None
            )
            return self._session.send(prepared, timeout=self.timeout, **settings)
        except requests.RequestException as e:
            error_text = redact_secrets(str(e))
            logger.error(f"{request.method} request failed: {error_text}")
            raise TransportError(f"HTTP request failed: {error_text}") from e

    def _resolve_url(self, url: str) -> str:
        if urlsplit(url).scheme:
            return url
        if not self.base_url:
            raise TransportError(
                f"Relative URL '{url}' and no base_url configured for the transport"
            )
        if url.startswith("?"):
            return self.base_url + url
        return urljoin(self.base_url, url)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation of transport."""
        return f"RequestsTransport(base_url={self.base_url}, timeout={self.timeout})"
