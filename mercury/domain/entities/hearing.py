"""Entidade que representa um anúncio de audiência pública já estruturado."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Tuple

_MARKDOWN_SPECIAL_CHARS = frozenset("_*[]()~`>#+-=|{}.!\\")

_LINK_LABEL = "Ссылка на публикацию"
_HEADLINE_SUFFIX = "состоятся публичные слушания"


def escape_markdown(text: str) -> str:
    """Escapa caracteres reservados do MarkdownV2 do Telegram."""

    return "".join(f"\\{char}" if char in _MARKDOWN_SPECIAL_CHARS else char for char in text)


@dataclass(frozen=True)
class Hearing:
    """Armazena os dados normalizados de uma audiência pública."""

    #: Endereço original do anúncio; também é a chave de deduplicação.
    url: str
    #: Local da audiência, já sem o trecho de data e hora.
    place: str
    #: Data e hora da audiência no fuso local do processo.
    time: datetime
    #: Temas da audiência, na ordem em que aparecem no anúncio.
    topics: Tuple[str, ...] = field(default_factory=tuple)
    #: Parágrafos de procedimento (recebimento de propostas e inscrições).
    proposals: Tuple[str, ...] = field(default_factory=tuple)
    #: Sequência original de parágrafos raspados, mantida para auditoria.
    raw: Tuple[str, ...] = field(default_factory=tuple)
    #: Indica se o anúncio já foi enviado pelo fluxo de publicação.
    published: bool = False

    def with_published(self, published: bool = True) -> "Hearing":
        """Retorna uma cópia com o indicador de publicação alterado."""

        return replace(self, published=published)

    def headline(self) -> str:
        """Linha de data, hora e local usada no início das mensagens."""

        return f"{self.time:%d.%m.%Y} в {self.time:%H:%M} в {self.place}"

    def to_text(self) -> str:
        """Renderiza o anúncio como texto simples."""

        if not self.topics:
            return ""
        lines = [f"{self.headline()} {_HEADLINE_SUFFIX}"]
        if len(self.topics) == 1:
            lines[0] += f" {self.topics[0]}"
        else:
            lines[0] += ":"
            lines.extend(f" - {topic}" for topic in self.topics)
        lines.extend(self.proposals)
        lines.append(f"{_LINK_LABEL}: {self.url}")
        return "\n".join(lines) + "\n"

    def to_markdown(self) -> str:
        """Renderiza o anúncio no formato MarkdownV2 aceito pelo Telegram."""

        if not self.topics:
            return ""
        header = f"*{escape_markdown(self.headline())}* {_HEADLINE_SUFFIX}"
        if len(self.topics) == 1:
            blocks = [f"{header} {escape_markdown(self.topics[0])}"]
        else:
            blocks = [f"{header}:"]
            blocks.extend(f" \\- {escape_markdown(topic)}" for topic in self.topics)
        blocks.extend(escape_markdown(proposal) for proposal in self.proposals)
        blocks.append(f"[{_LINK_LABEL}]({self.url})")
        return "\n\n".join(blocks) + "\n"

    def render(self, fmt: str = "text") -> str:
        """Renderiza o anúncio no formato solicitado (``markdown`` ou ``text``)."""

        if fmt == "markdown":
            return self.to_markdown()
        return self.to_text()

    def to_mapping(self) -> Dict[str, Any]:
        """Serializa o anúncio em um dicionário simples."""

        return {
            "url": self.url,
            "place": self.place,
            "time": self.time,
            "topics": list(self.topics),
            "proposals": list(self.proposals),
            "raw": list(self.raw),
            "published": self.published,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Hearing":
        """Reconstrói o anúncio a partir da estrutura produzida por ``to_mapping``."""

        return cls(
            url=str(data["url"]),
            place=str(data.get("place") or ""),
            time=data["time"],
            topics=_as_tuple(data.get("topics")),
            proposals=_as_tuple(data.get("proposals")),
            raw=_as_tuple(data.get("raw")),
            published=bool(data.get("published", False)),
        )


def _as_tuple(values: Iterable[Any] | None) -> Tuple[str, ...]:
    return tuple(str(value) for value in values or ())
