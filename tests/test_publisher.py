"""Testes do cliente que publica anúncios pela Bot API do Telegram."""
from __future__ import annotations

import json

import httpx
import pytest

from mercury.domain.errors import PublishError
from mercury.infrastructure.publisher import TelegramPublisher


class _FailingClient:
    """Cliente HTTP falso que simula falha de conexão."""

    def post(self, *_args, **_kwargs):
        request = httpx.Request("POST", "https://api.telegram.org/botTOKEN/sendMessage")
        raise httpx.ConnectError("boom", request=request)


def _client(status_code: int, requests: list[httpx.Request], body: str = "{}") -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, text=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_publish_posts_markdown_payload() -> None:
    sent: list[httpx.Request] = []
    publisher = TelegramPublisher("TOKEN", "@channel", client=_client(200, sent))

    publisher.publish("*mensagem*")

    assert len(sent) == 1
    assert sent[0].url == "https://api.telegram.org/botTOKEN/sendMessage"
    assert json.loads(sent[0].content) == {
        "chat_id": "@channel",
        "parse_mode": "MarkdownV2",
        "text": "*mensagem*",
        "disable_web_page_preview": True,
    }


def test_publish_raises_publish_error_for_non_200() -> None:
    sent: list[httpx.Request] = []
    publisher = TelegramPublisher(
        "TOKEN", "@channel", client=_client(400, sent, body="Bad Request")
    )

    with pytest.raises(PublishError) as excinfo:
        publisher.publish("texto")

    assert excinfo.value.status_code == 400
    assert excinfo.value.body == "Bad Request"
    assert str(excinfo.value) == "response status code is not OK: 400"


def test_publish_wraps_connection_errors() -> None:
    publisher = TelegramPublisher("TOKEN", "@channel", client=_FailingClient())

    with pytest.raises(PublishError) as excinfo:
        publisher.publish("texto")

    assert excinfo.value.status_code == 0


def test_publish_without_token_is_skipped() -> None:
    sent: list[httpx.Request] = []
    publisher = TelegramPublisher("", "@channel", client=_client(200, sent))

    publisher.publish("texto")

    assert sent == []
