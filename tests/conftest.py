"""Dublês compartilhados pelos testes de serviço e da API."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional

import pytest

from mercury.application import HearingsService
from mercury.domain import (
    Hearing,
    HearingPublisher,
    HearingRepository,
    HearingSource,
    Selector,
)
from mercury.domain.errors import FetchError, HearingNotFoundError, PublishError
from mercury.parsing import DateResolver, HearingParser

LISTING_URL = "https://bga32.ru/publichnye-slushaniya/"


class InMemoryHearingRepository(HearingRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Hearing] = {}

    def create(self, hearing: Hearing) -> None:
        if hearing.url in self.items:
            raise ValueError(f"Hearing '{hearing.url}' already exists")
        self.items[hearing.url] = hearing

    def update(self, hearing: Hearing) -> None:
        current = self.items.get(hearing.url)
        if current is None:
            raise HearingNotFoundError(hearing.url)
        self.items[hearing.url] = hearing.with_published(current.published)

    def find(self, url: str) -> Optional[Hearing]:
        return self.items.get(url)

    def exists(self, url: str) -> bool:
        return url in self.items

    def list_all(self) -> Iterable[Hearing]:
        return sorted(self.items.values(), key=lambda item: item.time)

    def list_unpublished(self) -> Iterable[Hearing]:
        for hearing in self.list_all():
            if not hearing.published:
                yield hearing

    def mark_published(self, urls: Iterable[str]) -> int:
        count = 0
        for url in urls:
            hearing = self.items.get(url)
            if hearing is not None and not hearing.published:
                self.items[url] = hearing.with_published()
                count += 1
        return count


class StubRetriever:
    """Retorna links e parágrafos pré-definidos no lugar de acessar a rede."""

    def __init__(self, links: List[str], pages: Dict[str, List[str]]) -> None:
        self.links = links
        self.pages = pages
        self.requested: List[str] = []

    def fetch_links(self, page_url: str, selector: Selector, force: bool = False) -> List[str]:
        self.requested.append(page_url)
        return list(self.links)

    def fetch_content(self, page_url: str, selector: Selector, force: bool = False) -> List[str]:
        self.requested.append(page_url)
        if page_url not in self.pages:
            raise FetchError(page_url, "unexpected response status", status_code=404)
        return list(self.pages[page_url])


class RecordingPublisher(HearingPublisher):
    def __init__(self, fail_after: int | None = None) -> None:
        self.messages: List[str] = []
        self._fail_after = fail_after

    def publish(self, message: str) -> None:
        if self._fail_after is not None and len(self.messages) >= self._fail_after:
            raise PublishError(400, "Bad Request")
        self.messages.append(message)


@pytest.fixture
def repository() -> InMemoryHearingRepository:
    return InMemoryHearingRepository()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


ANNOUNCEMENTS: Dict[str, List[str]] = {
    "https://bga32.ru/slushaniya-1/": [
        "05 марта 2022 года в 11:00 в Дом культуры состоятся публичные слушания по проекту X.",
        "Прием предложений до 1 марта.",
    ],
    "https://bga32.ru/slushaniya-3/": ["Объявление отменено."],
    "https://bga32.ru/slushaniya-4/": [
        "12 апреля 2023 года в 15.00 в здании администрации состоятся публичные слушания:",
        "- по проекту A;",
        "- по проекту B.",
        "Экспозиция проекта открыта с 1 по 10 апреля.",
    ],
}


@pytest.fixture
def retriever() -> StubRetriever:
    links = ["/slushaniya-4/", "/slushaniya-3/", "/slushaniya-2/", "/slushaniya-1/"]
    return StubRetriever(links, ANNOUNCEMENTS)


@pytest.fixture
def service(retriever, repository, publisher) -> HearingsService:
    return HearingsService(
        retriever=retriever,
        parser=HearingParser(DateResolver(clock=lambda: datetime(2024, 1, 1))),
        repository=repository,
        publisher=publisher,
        source=HearingSource(listing_url=LISTING_URL),
    )
