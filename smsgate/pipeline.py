"""
Request pipeline.

Composes an ordered list of plugins around a transport into a single
``send`` capability. Plugins see the request in registration order and
the response in reverse order.

This module follows the Dependency Injection pattern:
- The transport is always passed in, never looked up
- Allows easy testing with fake transports
"""

from typing import Iterable, List, Optional, Sequence

import requests
from loguru import logger

from smsgate.adapters.plugins import AuthenticationPlugin, BaseUriPlugin, ErrorPlugin
from smsgate.adapters.requests_transport import RequestsTransport
from smsgate.domain.interfaces import IRequestPlugin, ITransport
from smsgate.domain.models import DEFAULT_API_PATH, Credentials, Endpoint
from smsgate.utils.redact import redact_secrets


class RequestPipeline(ITransport):
    """
    Transport decorated with an ordered list of plugins.

    Every request sent through the pipeline is transformed by each plugin,
    sent once by the underlying transport, and the response is inspected by
    each plugin on the way back. Transport errors propagate unchanged.

    Attributes:
        transport: Underlying transport
        plugins: Plugins in registration order
    """

    def __init__(self, transport: ITransport, plugins: Iterable[IRequestPlugin] = ()):
        self.transport = transport
        self.plugins: List[IRequestPlugin] = list(plugins)

    def send(self, request: requests.Request) -> requests.Response:
        for plugin in self.plugins:
            request = plugin.transform_request(request)

        logger.debug(f"{request.method} {redact_secrets(request.url)}")
        response = self.transport.send(request)
        logger.debug(f"HTTP {response.status_code} ({len(response.content or b'')} bytes)")

        for plugin in reversed(self.plugins):
            response = plugin.inspect_response(request, response)

        return response

    def __repr__(self) -> str:
        return f"RequestPipeline(transport={self.transport!r}, plugins={self.plugins!r})"


class HttpClientFactory:
    """
    Factory for pipelines talking to the gateway.

    Usage:
        http_client = HttpClientFactory.create("https://192.168.0.1:8080", "SMS", "123")
        client = SmsGateClient(http_client)
    """

    @staticmethod
    def create(
        host: Optional[str],
        user: str,
        password: str = "",
        plugins: Sequence[IRequestPlugin] = (),
        transport: Optional[ITransport] = None,
        path: str = DEFAULT_API_PATH,
        timeout: float = 30,
    ) -> RequestPipeline:
        """
        Build the pipeline used to talk to the gateway.

        Registration order is: caller plugins, error translation,
        authentication, then base URI resolution when a host is given.

        Args:
            host: Gateway scheme and host (e.g. ``https://192.168.0.1:8080``);
                None leaves URL resolution to the transport
            user: Gateway username
            password: Gateway password
            plugins: Additional plugins, run first on the way out
            transport: Base transport (default: RequestsTransport)
            path: API path appended to the host
            timeout: Timeout for the default transport, in seconds

        Returns:
            Configured RequestPipeline instance
        """
        if transport is None:
            transport = RequestsTransport(timeout=timeout)

        chain: List[IRequestPlugin] = list(plugins)
        chain.append(ErrorPlugin())
        chain.append(AuthenticationPlugin(Credentials(user=user, password=password)))

        if host:
            chain.append(BaseUriPlugin(Endpoint(host=host, path=path)))

        return RequestPipeline(transport, chain)
