"""
SMSGATE client.

Sends SMS messages and queries their delivery status through the gateway's
query-string API:

    GET {host}/rest.api?cmd=send&user=<u>&pswd=<p>&phones=<p1>;<p2>&text=<t>
    GET {host}/rest.api?cmd=msg&user=<u>&pswd=<p>&id=<id>

Usage:
    client = SmsGateClient(HttpClientFactory.create("https://192.168.0.1:8080", "SMS", "123"))
    sent = client.send(["79001234567", "79001234568"], "Test message")
    status = client.query_status(sent[0].id)
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union
from urllib.parse import urlencode

import requests
from loguru import logger

from smsgate.config import GatewaySettings
from smsgate.domain.interfaces import IRequestPlugin, ITransport
from smsgate.domain.models import MessageStatus, SentMessage, clean_params
from smsgate.pipeline import HttpClientFactory
from smsgate.services.response_parser import decode_body, parse_response


PhoneNumbers = Union[str, Iterable[str]]


class SmsGateClient:
    """
    Client for the SMSGATE HTTP API.

    Holds no state besides the HTTP client, so one instance can be shared
    between threads. Every call issues exactly one request; nothing is retried.

    Attributes:
        http_client: Transport used for requests, normally a RequestPipeline
            that adds credentials, the base URL and error translation
    """

    def __init__(self, http_client: ITransport):
        self.http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: GatewaySettings,
        plugins: Sequence[IRequestPlugin] = (),
        transport: Optional[ITransport] = None,
    ) -> "SmsGateClient":
        """
        Create a client from GatewaySettings.

        Args:
            settings: Connection settings
            plugins: Additional pipeline plugins
            transport: Base transport (default: RequestsTransport)

        Returns:
            Configured SmsGateClient instance
        """
        http_client = HttpClientFactory.create(
            host=settings.host,
            user=settings.user,
            password=settings.password,
            plugins=plugins,
            transport=transport,
            path=settings.path,
            timeout=settings.timeout,
        )
        return cls(http_client)

    def api_call(
        self,
        command: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, str]]:
        """
        Execute an arbitrary API command.

        Empty parameters (None or "") are dropped before encoding.

        Args:
            command: Value of the ``cmd`` parameter (``send``, ``msg``)
            params: Command parameters

        Returns:
            Parsed response records for HTTP 200. Any other status the
            pipeline did not raise for yields an empty list.

        Raises:
            GatewayError: On HTTP 400, 401 or 404
            TransportError: If the request could not be sent
        """
        query = clean_params({"cmd": command, **(params or {})})
        request = requests.Request(method="GET", url="?" + urlencode(query))

        response = self.http_client.send(request)

        if response.status_code != 200:
            logger.warning(
                f"Command '{command}' returned unexpected HTTP {response.status_code}, "
                f"no records parsed"
            )
            return []

        return parse_response(decode_body(response))

    def send(
        self,
        phones: PhoneNumbers,
        text: Optional[str] = None,
        charset: Optional[str] = None,
        rep: Optional[int] = None,
    ) -> List[SentMessage]:
        """
        Send an SMS to one or more recipients.

        Args:
            phones: Phone number, or list of numbers (joined with ';')
            text: Message text, UTF-8 unless ``charset`` says otherwise
            charset: Text encoding declared to the gateway (e.g. windows-1251)
            rep: 1 to request a delivery report, 0 to decline

        Returns:
            One SentMessage per accepted phone number, in submission order
        """
        if not isinstance(phones, str):
            phones = ";".join(phones)

        records = self.api_call(
            "send",
            {
                "phones": phones,
                "text": text,
                "charset": charset,
                "rep": rep,
            },
        )

        logger.info(f"Gateway accepted {len(records)} message(s)")
        return [SentMessage.from_record(record) for record in records]

    def query_status(self, message_id: str) -> List[MessageStatus]:
        """
        Get the delivery status of a sent message.

        Args:
            message_id: Message id returned by ``send``

        Returns:
            Status records (normally exactly one)
        """
        records = self.api_call("msg", {"id": message_id})
        return [MessageStatus.from_record(record) for record in records]

    def __repr__(self) -> str:
        return f"SmsGateClient(http_client={self.http_client!r})"
