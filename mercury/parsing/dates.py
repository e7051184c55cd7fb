"""Resolução da linha composta de data, hora e local de uma audiência."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence, Tuple

from mercury.domain.errors import ImplausibleDateError, PlaceTimeError

from .patterns import COMPOSITE_DATE_PLACE, MONTHS, URL_YEAR

#: Datas anteriores indicam erro de extração, não histórico válido.
EPOCH_THRESHOLD = datetime(2021, 5, 1)

log = logging.getLogger("mercury.parser.dates")


@dataclass(frozen=True)
class CompositeLine:
    """Trechos capturados da linha "DD месяц [YYYY года] в HH:MM в <local>"."""

    day: str
    month: str
    year: Optional[str]
    hour: str
    minute: str
    place: str


@dataclass(frozen=True)
class ResolutionContext:
    """Informações disponíveis para as estratégias de resolução do ano."""

    line: CompositeLine
    url: Optional[str]
    now: datetime


YearStrategy = Callable[[ResolutionContext], Optional[int]]


def extract_composite(text: str) -> Optional[CompositeLine]:
    """Localiza a linha composta em ``text`` e retorna os trechos capturados."""

    match = COMPOSITE_DATE_PLACE.search(text)
    if not match:
        return None
    return CompositeLine(
        day=match.group("day"),
        month=match.group("month"),
        year=match.group("year"),
        hour=match.group("hour"),
        minute=match.group("minute"),
        place=match.group("place").strip(),
    )


def year_from_capture(context: ResolutionContext) -> Optional[int]:
    """Ano escrito explicitamente na linha composta."""

    value = context.line.year
    if value and value.isdigit():
        return int(value)
    return None


def year_from_url(context: ResolutionContext) -> Optional[int]:
    """Ano presente no final da URL do anúncio (``...-2022-goda/``)."""

    if not context.url:
        return None
    match = URL_YEAR.search(context.url)
    if not match:
        return None
    return int(match.group("year"))


def current_year(context: ResolutionContext) -> Optional[int]:
    """Ano corrente no momento da análise."""

    return context.now.year


DEFAULT_YEAR_STRATEGIES: Tuple[YearStrategy, ...] = (
    year_from_capture,
    year_from_url,
    current_year,
)


def _int_or_default(value: Optional[str], default: int) -> int:
    if value is None or not value.strip().isdigit():
        return default
    return int(value)


class DateResolver:
    """Converte a linha composta em data/hora local e local limpo."""

    def __init__(
        self,
        *,
        min_time: datetime = EPOCH_THRESHOLD,
        clock: Callable[[], datetime] = datetime.now,
        year_strategies: Sequence[YearStrategy] = DEFAULT_YEAR_STRATEGIES,
    ) -> None:
        self._min_time = min_time
        self._clock = clock
        self._year_strategies = tuple(year_strategies)

    @property
    def min_time(self) -> datetime:
        return self._min_time

    def resolve_year(self, line: CompositeLine, url: Optional[str] = None) -> int:
        """Aplica as estratégias de ano em ordem até a primeira que encontrar um valor."""

        context = ResolutionContext(line=line, url=url, now=self._clock())
        for strategy in self._year_strategies:
            year = strategy(context)
            if year is not None:
                log.debug("ano %s resolvido por %s", year, strategy.__name__)
                return year
        return context.now.year

    def resolve(self, text: str, url: Optional[str] = None) -> Tuple[datetime, str]:
        """Resolve ``text`` em ``(data_hora, local)``.

        Raises:
            PlaceTimeError: quando a linha não segue o formato esperado ou
                descreve uma data inexistente.
            ImplausibleDateError: quando a data resolvida é anterior ao limite
                mínimo configurado.
        """

        if not text or not text.strip():
            raise PlaceTimeError(
                "cannot parse date and place. empty string", url=url, raw=text
            )
        line = extract_composite(text)
        if line is None or not line.place:
            raise PlaceTimeError(
                f"cannot parse date and place: '{text}'", url=url, raw=text
            )

        month = MONTHS.get(line.month.lower())
        if month is None:
            raise PlaceTimeError(
                f"cannot parse date and place. unknown month '{line.month}'",
                url=url,
                raw=text,
            )

        year = self.resolve_year(line, url)
        day = _int_or_default(line.day, 1)
        hour = _int_or_default(line.hour, 0)
        minute = _int_or_default(line.minute, 0)
        try:
            when = datetime(year, month, day, hour, minute)
        except ValueError as exc:
            raise PlaceTimeError(
                f"cannot parse date and place: {exc}", url=url, raw=text
            ) from exc

        if when < self._min_time:
            raise ImplausibleDateError(
                f"failed parse date. raw strings with date: '{text}'",
                url=url,
                raw=text,
            )
        return when, line.place


__all__ = [
    "CompositeLine",
    "DEFAULT_YEAR_STRATEGIES",
    "DateResolver",
    "EPOCH_THRESHOLD",
    "ResolutionContext",
    "current_year",
    "extract_composite",
    "year_from_capture",
    "year_from_url",
]
