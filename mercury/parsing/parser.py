"""Segmentação da sequência de parágrafos de um anúncio em uma audiência."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from mercury.domain.entities import Hearing
from mercury.domain.errors import EmptyContentError, NoTopicsError, TopicSplitError

from .dates import DateResolver
from .normalization import clean_line
from .patterns import FALLBACK_TOPIC, PROPOSAL, TOPIC_END, TOPIC_START


class ScanState(enum.Enum):
    SCAN_FOR_TOPIC_START = "scan_for_topic_start"
    SCAN_FOR_TOPIC_END = "scan_for_topic_end"


@dataclass(frozen=True)
class TopicBoundary:
    """Intervalo ``[start, end)`` de parágrafos que descrevem os temas."""

    start: int
    end: int

    @property
    def single_paragraph(self) -> bool:
        return self.end == self.start + 1


def find_topic_boundary(paragraphs: Sequence[str]) -> TopicBoundary:
    """Localiza o parágrafo inicial dos temas e o parágrafo que encerra a seção.

    O último parágrafo com o marcador de início antes do marcador de fim é o
    início. Marcadores de fim anteriores a qualquer início são ignorados e,
    sem marcador de fim, a seção tem um único parágrafo.
    """

    state = ScanState.SCAN_FOR_TOPIC_START
    start = 0
    end: Optional[int] = None
    for index, paragraph in enumerate(paragraphs):
        if TOPIC_START.search(paragraph):
            start = index
            state = ScanState.SCAN_FOR_TOPIC_END
        if state is ScanState.SCAN_FOR_TOPIC_END and TOPIC_END.search(paragraph):
            end = index if index > start else start + 1
            break
    if end is None:
        end = start + 1
    return TopicBoundary(start=start, end=end)


def find_proposals(paragraphs: Sequence[str]) -> List[str]:
    """Retorna, sem alterações, os parágrafos sobre recebimento de propostas."""

    return [paragraph for paragraph in paragraphs if PROPOSAL.search(paragraph)]


class HearingParser:
    """Transforma os parágrafos raspados de um anúncio em ``Hearing``.

    O parser não guarda estado entre chamadas: o resultado depende apenas
    dos parágrafos, da URL de origem e do relógio do ``DateResolver``.
    """

    def __init__(self, resolver: DateResolver | None = None) -> None:
        self._resolver = resolver or DateResolver()
        self._log = logging.getLogger("mercury.parser")

    def parse(self, paragraphs: Sequence[str], url: str = "") -> Hearing:
        if not paragraphs:
            raise EmptyContentError("empty content", url=url or None)

        boundary = find_topic_boundary(paragraphs)
        self._log.debug(
            "temas entre os parágrafos %d e %d de %s",
            boundary.start,
            boundary.end,
            url or "<sem url>",
        )

        if boundary.single_paragraph:
            place, topic = self._split_single(paragraphs[boundary.start], url)
            topic = clean_line(topic)
            topics = [topic] if topic else []
        else:
            # O trecho de tema do parágrafo inicial é descartado neste ramo.
            place = TOPIC_START.split(paragraphs[boundary.start])[0]
            topics = []
            for paragraph in paragraphs[boundary.start + 1 : boundary.end]:
                topic = clean_line(paragraph)
                if topic:
                    topics.append(topic)

        if not topics:
            raise NoTopicsError(
                "failed parse content. cannot get topics",
                url=url or None,
                raw=paragraphs[boundary.start],
            )

        when, resolved_place = self._resolver.resolve(place, url or None)

        return Hearing(
            url=url,
            place=resolved_place,
            time=when,
            topics=tuple(topics),
            proposals=tuple(find_proposals(paragraphs)),
            raw=tuple(paragraphs),
        )

    def _split_single(self, paragraph: str, url: str) -> Tuple[str, str]:
        """Separa data/local e tema de um anúncio concentrado em um parágrafo."""

        parts = TOPIC_START.split(paragraph)
        if len(parts) == 2:
            return parts[0], parts[1]

        match = FALLBACK_TOPIC.search(paragraph)
        if match:
            self._log.debug("marcador de tema ausente, usando trecho 'по проекту'")
            return paragraph[: match.start()], match.group("topic")

        raise TopicSplitError(
            "failed parse content. cannot split to time/place and topic",
            url=url or None,
            raw=paragraph,
        )


__all__ = [
    "HearingParser",
    "ScanState",
    "TopicBoundary",
    "find_proposals",
    "find_topic_boundary",
]
