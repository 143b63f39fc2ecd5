"""Shared fixtures: canned responses and a recording transport."""

from typing import List, Optional, Union

import pytest
import requests
from requests.utils import get_encoding_from_headers

from smsgate.domain.interfaces import ITransport


def build_response(
    status_code: int = 200,
    body: Union[str, bytes] = "",
    headers: Optional[dict] = None,
) -> requests.Response:
    """Build a requests.Response the way the HTTP adapter would."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.headers.update(headers or {"Content-Type": "text/plain"})
    response.encoding = get_encoding_from_headers(response.headers)
    return response


class FakeTransport(ITransport):
    """Transport returning queued responses (or raising queued exceptions)."""

    def __init__(self, *responses):
        self.responses: List = list(responses)
        self.requests: List[requests.Request] = []

    def send(self, request: requests.Request) -> requests.Response:
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last_url(self) -> str:
        return self.requests[-1].url


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def fake_transport():
    return FakeTransport
