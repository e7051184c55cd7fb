"""Cliente HTTP que publica anúncios renderizados em um chat do Telegram."""
from __future__ import annotations

import logging

import httpx

from mercury.domain.errors import PublishError
from mercury.domain.ports import HearingPublisher

_TELEGRAM_API_URL = "https://api.telegram.org"
_MAX_ERROR_BODY = 1 << 20


class TelegramPublisher(HearingPublisher):
    """Envia mensagens MarkdownV2 pela Bot API do Telegram."""

    def __init__(
        self,
        token: str,
        chat_id: str,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        api_url: str = _TELEGRAM_API_URL,
    ) -> None:
        """Configura o cliente HTTP utilizado para publicar as mensagens.

        Parameters
        ----------
        token:
            Token do bot; quando vazio a publicação é ignorada.
        chat_id:
            Identificador do chat ou canal de destino.
        client:
            Cliente HTTP opcional reutilizado por outros componentes.
        timeout:
            Tempo limite aplicado às requisições quando o cliente interno é criado.
        """

        self._skip = not token
        self._chat_id = chat_id
        self._endpoint = f"{api_url.rstrip('/')}/bot{token}/sendMessage"
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._log = logging.getLogger("mercury.publisher")

    def publish(self, message: str) -> None:
        if self._skip:
            self._log.debug("token vazio; publicação ignorada")
            return

        payload = {
            "chat_id": self._chat_id,
            "parse_mode": "MarkdownV2",
            "text": message,
            "disable_web_page_preview": True,
        }
        self._log.debug("publicando mensagem no chat %s", self._chat_id)
        try:
            response = self._client.post(self._endpoint, json=payload)
        except httpx.HTTPError as exc:
            raise PublishError(0, f"request failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            body = response.text[:_MAX_ERROR_BODY]
            self._log.error(
                "Telegram respondeu %s: %s", response.status_code, body
            )
            raise PublishError(response.status_code, body)

    def close(self) -> None:
        """Fecha o cliente HTTP caso esta instância seja a proprietária dele."""

        if self._owns_client:
            self._client.close()


__all__ = ["TelegramPublisher"]
