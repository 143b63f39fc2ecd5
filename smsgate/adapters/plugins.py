"""
Request pipeline plugins.

- AuthenticationPlugin: adds the account credentials to the query string
- BaseUriPlugin: turns query-only request URLs into absolute gateway URLs
- ErrorPlugin: converts the gateway's failure status codes into exceptions
"""

from typing import Dict, Type
from urllib.parse import parse_qsl, urlencode, urlsplit

import requests
from loguru import logger

from smsgate.domain.interfaces import (
    IRequestPlugin,
    GatewayError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
)
from smsgate.domain.models import Credentials, Endpoint


def append_query(url: str, params: Dict[str, str]) -> str:
    """
    Append URL-encoded parameters to a URL that may already have a query.

    Examples:
        >>> append_query("?cmd=msg", {"user": "SMS"})
        '?cmd=msg&user=SMS'
        >>> append_query("", {"user": "SMS"})
        '?user=SMS'
    """
    if not params:
        return url
    if "?" not in url:
        separator = "?"
    elif url.endswith(("?", "&")):
        separator = ""
    else:
        separator = "&"
    return f"{url}{separator}{urlencode(params)}"


class AuthenticationPlugin(IRequestPlugin):
    """
    Adds ``user`` and ``pswd`` query parameters to every request.

    Parameters the caller already put in the query are left untouched.
    """

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def transform_request(self, request: requests.Request) -> requests.Request:
        existing = {key for key, _ in parse_qsl(urlsplit(request.url).query, keep_blank_values=True)}

        missing = {}
        for key, value in self.credentials.as_query().items():
            if key in existing:
                logger.warning(f"Query parameter '{key}' already set, credential not applied")
                continue
            missing[key] = value

        request.url = append_query(request.url, missing)
        return request

    def __repr__(self) -> str:
        return f"AuthenticationPlugin(user={self.credentials.user})"


class BaseUriPlugin(IRequestPlugin):
    """
    Resolves relative request URLs against the gateway endpoint.

    A request URL is expected to be empty or query-only (``?cmd=...``).
    A URL whose path is exactly the endpoint path gets the path once,
    absolute URLs are left as they are, and any other relative path is
    rejected with ValueError.
    """

    def __init__(self, endpoint: Endpoint):
        self.endpoint = endpoint

    def transform_request(self, request: requests.Request) -> requests.Request:
        url = request.url or ""
        if urlsplit(url).scheme:
            return request

        path, separator, query = url.partition("?")
        if path not in ("", self.endpoint.path):
            raise ValueError(
                f"Request URL '{url}' must be query-only or start with '{self.endpoint.path}'"
            )

        request.url = self.endpoint.url + separator + query
        return request

    def __repr__(self) -> str:
        return f"BaseUriPlugin(url={self.endpoint.url})"


class ErrorPlugin(IRequestPlugin):
    """
    Converts HTTP 400/401/404 responses into GatewayError subclasses.

    Any other status code passes through unchanged.
    """

    ERRORS: Dict[int, Type[GatewayError]] = {
        400: BadRequestError,
        401: UnauthorizedError,
        404: NotFoundError,
    }

    MESSAGES: Dict[int, str] = {
        400: "Request parameters are malformed or required parameters are missing",
        401: "Invalid username or password",
        404: "Message with the given id was not found for this user",
    }

    def inspect_response(
        self,
        request: requests.Request,
        response: requests.Response,
    ) -> requests.Response:
        error_class = self.ERRORS.get(response.status_code)
        if error_class is None:
            return response

        logger.debug(f"Gateway returned HTTP {response.status_code}, raising {error_class.__name__}")
        raise error_class(
            self.MESSAGES[response.status_code],
            request=request,
            response=response,
        )
