"""Hierarquia de erros compartilhada pelas camadas do Mercury."""
from __future__ import annotations

from typing import Optional


class MercuryError(RuntimeError):
    """Erro base de todas as falhas reportadas pelo Mercury."""


class FetchError(MercuryError):
    """Falha ao obter ou interpretar uma página remota.

    Cobre erros de rede, status diferente de 200, tempo limite excedido e
    falhas de decodificação ou de seletor. Nunca é repetida internamente.
    """

    kind = "fetch"

    def __init__(
        self, url: str, reason: str, *, status_code: Optional[int] = None
    ) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        message = f"failed to fetch {url}: {reason}"
        if status_code is not None:
            message += f" (status {status_code})"
        super().__init__(message)


class CacheError(MercuryError):
    """Entrada de cache ausente, ilegível ou impossível de gravar."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"cache entry '{key}': {reason}")


class ParseError(MercuryError):
    """Falha terminal ao transformar parágrafos em uma audiência."""

    kind = "parse"

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        raw: Optional[str] = None,
    ) -> None:
        self.url = url
        self.raw = raw
        detail = message
        if url:
            detail += f" [url={url}]"
        super().__init__(detail)
        self.message = message


class EmptyContentError(ParseError):
    kind = "empty-input"


class TopicSplitError(ParseError):
    kind = "topic-unsplittable"


class NoTopicsError(ParseError):
    kind = "no-topics-found"


class PlaceTimeError(ParseError):
    kind = "place-time-unparseable"


class ImplausibleDateError(ParseError):
    kind = "date-implausible"


class HearingNotFoundError(MercuryError):
    """Nenhuma audiência armazenada corresponde à URL informada."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"hearing not found: {url}")


class PublishError(MercuryError):
    """O serviço de mensagens recusou a publicação."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"response status code is not OK: {status_code}")


__all__ = [
    "CacheError",
    "EmptyContentError",
    "FetchError",
    "HearingNotFoundError",
    "ImplausibleDateError",
    "MercuryError",
    "NoTopicsError",
    "ParseError",
    "PlaceTimeError",
    "PublishError",
    "TopicSplitError",
]
