"""Testes do parser que transforma parágrafos de anúncios em audiências."""
from __future__ import annotations

from datetime import datetime

import pytest

from mercury.domain.errors import (
    EmptyContentError,
    ImplausibleDateError,
    NoTopicsError,
    ParseError,
    PlaceTimeError,
    TopicSplitError,
)
from mercury.parsing import DateResolver, HearingParser, find_proposals, find_topic_boundary

URL = "https://bga32.ru/arxitektura-i-gradostroitelstvo/publichnye-slushaniya/slushaniya-5-marta/"


@pytest.fixture
def parser() -> HearingParser:
    resolver = DateResolver(clock=lambda: datetime(2024, 1, 10, 12, 0))
    return HearingParser(resolver)


def test_parse_single_paragraph_announcement(parser: HearingParser) -> None:
    paragraphs = [
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X.",
        "Приём предложений от участников публичных слушаний осуществляет оргкомитет.",
    ]

    hearing = parser.parse(paragraphs, URL)

    assert hearing.place == "Дом культуры"
    assert hearing.topics == ("по проекту X",)
    assert hearing.time == datetime(2022, 3, 5, 11, 0)
    assert len(hearing.proposals) == 1
    assert hearing.url == URL
    assert hearing.raw == tuple(paragraphs)
    assert hearing.published is False


def test_parse_multi_paragraph_announcement(parser: HearingParser) -> None:
    paragraphs = [
        "12 апреля 2023 года в 15.00 в здании администрации состоятся публичные слушания:",
        "- по проекту планировки территории;",
        "- по проекту межевания территории.",
        "Экспозиция проекта открыта с 1 по 10 апреля.",
        "Приём предложений и замечаний осуществляется до 10 апреля.",
    ]

    hearing = parser.parse(paragraphs, URL)

    assert hearing.place == "здании администрации"
    assert hearing.time == datetime(2023, 4, 12, 15, 0)
    assert hearing.topics == (
        "по проекту планировки территории",
        "по проекту межевания территории",
    )
    assert hearing.proposals == (
        "Приём предложений и замечаний осуществляется до 10 апреля.",
    )


def test_single_and_multi_paragraph_forms_are_equivalent(parser: HearingParser) -> None:
    single = parser.parse(
        [
            "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X.",
            "Участники публичных слушаний вправе вносить предложения.",
        ],
        URL,
    )
    multi = parser.parse(
        [
            "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания:",
            "по проекту X.",
            "Участники публичных слушаний вправе вносить предложения.",
        ],
        URL,
    )

    assert single.place == multi.place
    assert single.time == multi.time
    assert single.topics == multi.topics


def test_parse_uses_fallback_topic_when_marker_is_missing(parser: HearingParser) -> None:
    hearing = parser.parse(
        ["05 марта 2022 года в 11:00 в Дом культуры по проекту планировки квартала."],
        URL,
    )

    assert hearing.place == "Дом культуры"
    assert hearing.topics == ("по проекту планировки квартала",)


def test_parse_raises_when_paragraph_cannot_be_split(parser: HearingParser) -> None:
    with pytest.raises(TopicSplitError) as excinfo:
        parser.parse(["Администрация города сообщает о переносе мероприятия."], URL)

    assert excinfo.value.kind == "topic-unsplittable"
    assert excinfo.value.url == URL


def test_parse_raises_when_topic_is_empty(parser: HearingParser) -> None:
    with pytest.raises(NoTopicsError) as excinfo:
        parser.parse(
            ["05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания ."],
            URL,
        )

    assert excinfo.value.message == "failed parse content. cannot get topics"


def test_parse_raises_for_empty_content(parser: HearingParser) -> None:
    with pytest.raises(EmptyContentError) as excinfo:
        parser.parse([], URL)

    assert excinfo.value.kind == "empty-input"
    assert isinstance(excinfo.value, ParseError)


def test_parse_takes_year_from_url(parser: HearingParser) -> None:
    hearing = parser.parse(
        ["05 марта в 11:00 в Дом культуры состоятся публичные слушания по проекту X."],
        "https://example.com/slushaniya-5-marta-2023/",
    )

    assert hearing.time == datetime(2023, 3, 5, 11, 0)


def test_parse_falls_back_to_current_year(parser: HearingParser) -> None:
    hearing = parser.parse(
        ["05 марта в 11:00 в Дом культуры состоятся публичные слушания по проекту X."],
        "https://example.com/slushaniya/",
    )

    assert hearing.time == datetime(2024, 3, 5, 11, 0)


def test_parse_rejects_dates_before_threshold(parser: HearingParser) -> None:
    paragraph = "01 января 1970 года в 10:00 в Дом культуры состоятся публичные слушания по проекту X."

    with pytest.raises(ImplausibleDateError) as excinfo:
        parser.parse([paragraph], URL)

    assert excinfo.value.kind == "date-implausible"
    assert excinfo.value.message.startswith("failed parse date. raw strings with date:")


def test_parse_reports_unparseable_place_and_time(parser: HearingParser) -> None:
    with pytest.raises(PlaceTimeError):
        parser.parse(["В Доме культуры состоятся публичные слушания по проекту X."], URL)


def test_parse_is_deterministic(parser: HearingParser) -> None:
    paragraphs = [
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X.",
        "Прием предложений до 1 марта.",
    ]

    assert parser.parse(paragraphs, URL) == parser.parse(list(paragraphs), URL)


def test_find_topic_boundary_ignores_end_marker_before_start() -> None:
    paragraphs = [
        "Участники публичных слушаний должны зарегистрироваться.",
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания:",
        "- по проекту X;",
        "Экспозиция проекта проводится в здании администрации.",
    ]

    boundary = find_topic_boundary(paragraphs)

    assert (boundary.start, boundary.end) == (1, 3)
    assert not boundary.single_paragraph


def test_find_topic_boundary_uses_last_start_before_end() -> None:
    paragraphs = [
        "Ранее состоятся обсуждения.",
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания:",
        "- по проекту X;",
        "Участники публичных слушаний",
    ]

    assert find_topic_boundary(paragraphs).start == 1


def test_find_topic_boundary_without_end_marker_is_single_paragraph() -> None:
    paragraphs = [
        "Вступление.",
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X.",
        "Дополнительная информация.",
    ]

    boundary = find_topic_boundary(paragraphs)

    assert (boundary.start, boundary.end) == (1, 2)
    assert boundary.single_paragraph


def test_find_topic_boundary_with_end_in_start_paragraph() -> None:
    paragraphs = [
        "05 марта 2022 года в 11:00 состоятся публичные слушания по проекту X. Участники приглашаются.",
    ]

    boundary = find_topic_boundary(paragraphs)

    assert (boundary.start, boundary.end) == (0, 1)


def test_find_proposals_matches_both_spellings() -> None:
    paragraphs = [
        "Прием предложений до 1 марта.",
        "Приём замечаний до 2 марта.",
        "При приёме предложений ...",
        "Приемная администрации.",
        "Текст без предложений.",
    ]

    assert find_proposals(paragraphs) == paragraphs[:3]


def test_parse_collects_prepositional_proposal_paragraph(parser: HearingParser) -> None:
    hearing = parser.parse(
        [
            "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X",
            "При приёме предложений ...",
        ],
        URL,
    )

    assert hearing.topics == ("по проекту X",)
    assert hearing.place == "Дом культуры"
    assert hearing.time == datetime(2022, 3, 5, 11, 0)
    assert hearing.proposals == ("При приёме предложений ...",)
