"""Tests for SmsGateClient: api_call, send and query_status."""

from urllib.parse import parse_qsl, urlsplit

import pytest

from smsgate.client import SmsGateClient
from smsgate.config import GatewaySettings
from smsgate.domain.interfaces import (
    BadRequestError,
    GatewayError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
)
from smsgate.domain.models import DeliveryState, MessageStatus, SentMessage
from smsgate.pipeline import HttpClientFactory


def sent_params(transport) -> dict:
    return dict(parse_qsl(urlsplit(transport.last_url).query, keep_blank_values=True))


@pytest.fixture
def gateway(fake_transport):
    """Client wired to a fake transport through the real pipeline."""

    def build(*responses):
        transport = fake_transport(*responses)
        pipeline = HttpClientFactory.create("http://gw:8080", "SMS", "123", transport=transport)
        return SmsGateClient(pipeline), transport

    return build


class TestApiCall:
    """Test cases for SmsGateClient.api_call."""

    def test_builds_query_and_parses_records(self, gateway, make_response):
        client, transport = gateway(make_response(200, "a=1&b=2\nc=3"))

        records = client.api_call("msg", {"id": "abc"})

        assert records == [{"a": "1", "b": "2"}, {"c": "3"}]
        assert transport.requests[0].method == "GET"
        assert sent_params(transport) == {"cmd": "msg", "id": "abc", "user": "SMS", "pswd": "123"}

    def test_empty_values_never_serialized(self, gateway, make_response):
        client, transport = gateway(make_response(200))

        client.api_call("send", {"phones": "1", "text": "", "charset": None})

        query = urlsplit(transport.last_url).query
        assert "text=" not in query
        assert "charset" not in query

    def test_empty_body_gives_empty_result(self, gateway, make_response):
        client, _ = gateway(make_response(200, ""))
        assert client.api_call("msg", {"id": "abc"}) == []

    @pytest.mark.parametrize("status,error_class", [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (404, NotFoundError),
    ])
    def test_gateway_errors_raise(self, gateway, make_response, status, error_class):
        client, _ = gateway(make_response(status, "phone=1&id=a"))
        with pytest.raises(error_class):
            client.api_call("msg", {"id": "abc"})

    @pytest.mark.parametrize("status", [201, 204, 302, 403, 429, 500, 502])
    def test_unmapped_status_gives_empty_result(self, gateway, make_response, status):
        """Statuses other than 200/400/401/404 yield no records and no error."""
        client, _ = gateway(make_response(status, "phone=1&id=a"))
        assert client.api_call("msg", {"id": "abc"}) == []

    def test_transport_error_propagates(self, gateway):
        client, _ = gateway(TransportError("connection refused"))
        with pytest.raises(TransportError):
            client.api_call("msg", {"id": "abc"})


class TestSend:
    """Test cases for SmsGateClient.send."""

    def test_multiple_recipients(self, gateway, make_response):
        client, transport = gateway(
            make_response(200, "phone=79001234567&id=abc-1\nphone=79001234568&id=abc-2")
        )

        result = client.send(["79001234567", "79001234568"], "hi")

        assert result == [
            SentMessage(phone="79001234567", id="abc-1"),
            SentMessage(phone="79001234568", id="abc-2"),
        ]
        params = sent_params(transport)
        assert params["cmd"] == "send"
        assert params["phones"] == "79001234567;79001234568"
        assert params["text"] == "hi"

    def test_phone_order_preserved(self, gateway, make_response):
        client, transport = gateway(make_response(200))
        client.send(("3", "1", "2"), "hi")
        assert sent_params(transport)["phones"] == "3;1;2"

    def test_single_phone_string(self, gateway, make_response):
        client, transport = gateway(make_response(200, "phone=79001234567&id=abc-1"))

        result = client.send("79001234567", "Test message")

        assert [r.id for r in result] == ["abc-1"]
        assert sent_params(transport)["phones"] == "79001234567"

    def test_phones_from_generator(self, gateway, make_response):
        client, transport = gateway(make_response(200))
        client.send((p for p in ["1", "2"]), "hi")
        assert sent_params(transport)["phones"] == "1;2"

    def test_optional_parameters(self, gateway, make_response):
        client, transport = gateway(make_response(200))

        client.send("79001234567", "Тестовое сообщение", charset="windows-1251", rep=1)

        params = sent_params(transport)
        assert params["text"] == "Тестовое сообщение"
        assert params["charset"] == "windows-1251"
        assert params["rep"] == "1"

    def test_rep_zero_is_sent(self, gateway, make_response):
        client, transport = gateway(make_response(200))
        client.send("79001234567", "hi", rep=0)
        assert sent_params(transport)["rep"] == "0"

    def test_omitted_optionals_not_sent(self, gateway, make_response):
        client, transport = gateway(make_response(200))
        client.send("79001234567", "hi")
        assert set(sent_params(transport)) == {"cmd", "phones", "text", "user", "pswd"}

    def test_unauthorized(self, gateway, make_response):
        client, _ = gateway(make_response(401, "Bad user or password"))

        with pytest.raises(GatewayError) as exc_info:
            client.send("79001234567", "hi")

        assert exc_info.value.status_code == 401
        assert exc_info.value.reason == "Bad user or password"


class TestQueryStatus:
    """Test cases for SmsGateClient.query_status."""

    def test_delivered(self, gateway, make_response):
        client, transport = gateway(
            make_response(200, "phone=79001234567&id=abc-1&status=3&err=0x00000000&err_msg=")
        )

        result = client.query_status("abc-1")

        assert len(result) == 1
        status = result[0]
        assert isinstance(status, MessageStatus)
        assert status.phone == "79001234567"
        assert status.id == "abc-1"
        assert status.status == 3
        assert status.state is DeliveryState.DELIVERED
        assert status.err == "0x00000000"
        assert status.err_msg == ""
        assert sent_params(transport) == {"cmd": "msg", "id": "abc-1", "user": "SMS", "pswd": "123"}

    def test_not_found(self, gateway, make_response):
        client, _ = gateway(make_response(404, "Message not found"))
        with pytest.raises(NotFoundError):
            client.query_status("missing")


class TestFromSettings:
    """Test cases for building a client from settings."""

    def test_uses_settings(self, fake_transport, make_response):
        transport = fake_transport(make_response(200))
        settings = GatewaySettings(host="https://gw", user="john", password="s3cr3t", path="/api")

        client = SmsGateClient.from_settings(settings, transport=transport)
        client.query_status("x")

        assert transport.last_url.startswith("https://gw/api?cmd=msg&id=x&")
        assert sent_params(transport)["user"] == "john"
        assert sent_params(transport)["pswd"] == "s3cr3t"
