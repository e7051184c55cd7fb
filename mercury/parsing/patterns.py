"""Tabela de padrões usados para segmentar anúncios de audiências públicas.

Todos os padrões são compilados uma única vez e tratados como dados
estáticos; nenhum módulo deve declarar literais de marcadores por conta
própria.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

#: "... состоятся [публичные слушания] ..." separa data/local do tema.
TOPIC_START = re.compile(r"\s+состоятся\s+(?:публичные\s+слушания\s+)?")

#: Abertura da seção de procedimentos ("Экспозиция проекта...", "Участники...").
TOPIC_END = re.compile(r"(?:Экспозиция\s+проект|Участник)")

#: Parágrafos sobre o recebimento de propostas ("Приём ...", "При приёме ...").
PROPOSAL = re.compile(r"^(?:При\s+)?[Пп]ри[её]ме?\s")

#: Tema solto após o local quando o marcador "состоятся" foi omitido no site.
FALLBACK_TOPIC = re.compile(r"\s+(?P<topic>по\s+проект\w*\s.*)$", re.DOTALL)

#: Linha composta "DD месяц [YYYY года] в HH:MM в|по адресу: <local>".
COMPOSITE_DATE_PLACE = re.compile(
    r"(?P<day>\d+)\s+(?P<month>[^\W\d_]+)"
    r"(?:\s+(?P<year>\d+)\s+(?:года|г\.?))?"
    r"\s+в\s+(?P<hour>\d+)[.:](?P<minute>\d+)"
    r"\s+(?:по\s+адресу:\s*|в\s+)(?P<place>.*)",
    re.DOTALL,
)

#: Marcador de lista no início e pontuação final de uma linha de tema.
CLEAN_LINE = re.compile(r"^\s*[-—–]?\s*(?P<line>.*?)\s*[.;]+\s*$", re.DOTALL)

#: Último ano (19xx ou 20xx) da URL, seguido apenas de não dígitos; ids numéricos
#: de quatro dígitos como "/news/8841/" são ignorados.
URL_YEAR = re.compile(r"(?<!\d)(?P<year>(?:19|20)\d{2})(?!\d)\D*$")

#: Qualquer sequência de espaços, incluindo NBSP e demais separadores Unicode.
WHITESPACE = re.compile(r"\s+")

MONTHS: Mapping[str, int] = MappingProxyType(
    {
        "январь": 1,
        "января": 1,
        "февраль": 2,
        "февраля": 2,
        "март": 3,
        "марта": 3,
        "апрель": 4,
        "апреля": 4,
        "май": 5,
        "мая": 5,
        "июнь": 6,
        "июня": 6,
        "июль": 7,
        "июля": 7,
        "август": 8,
        "августа": 8,
        "сентябрь": 9,
        "сентября": 9,
        "октябрь": 10,
        "октября": 10,
        "ноябрь": 11,
        "ноября": 11,
        "декабрь": 12,
        "декабря": 12,
    }
)

__all__ = [
    "CLEAN_LINE",
    "COMPOSITE_DATE_PLACE",
    "FALLBACK_TOPIC",
    "MONTHS",
    "PROPOSAL",
    "TOPIC_END",
    "TOPIC_START",
    "URL_YEAR",
    "WHITESPACE",
]
