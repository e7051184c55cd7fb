"""Dependency container for the hearings pipeline."""
from __future__ import annotations

from dataclasses import dataclass

import requests

from mercury import settings
from mercury.application import HearingsService
from mercury.domain import HearingSource, Selector
from mercury.domain.ports import HearingPublisher
from mercury.domain.repositories import HearingRepository
from mercury.infrastructure.cache import FileCacheStore
from mercury.infrastructure.database import MongoClientFactory
from mercury.infrastructure.publisher import TelegramPublisher
from mercury.infrastructure.repositories import MongoHearingRepository
from mercury.infrastructure.retriever import ContentRetriever
from mercury.parsing import DateResolver, HearingParser


@dataclass
class MercuryContainer:
    """Container exposing the hearings service and its dependencies."""

    source: HearingSource
    cache: FileCacheStore
    retriever: ContentRetriever
    parser: HearingParser
    repository: HearingRepository
    publisher: HearingPublisher
    hearings_service: HearingsService


def build_source() -> HearingSource:
    """Monta a configuração do site a partir das variáveis de ambiente."""

    return HearingSource(
        listing_url=settings.get_listing_url(),
        links=Selector(query=settings.get_links_selector(), attribute="href"),
        content=Selector(query=settings.get_content_selector()),
    )


def build_container(
    *,
    factory: MongoClientFactory | None = None,
    repository: HearingRepository | None = None,
    publisher: HearingPublisher | None = None,
    session: requests.Session | None = None,
) -> MercuryContainer:
    """Build the hearings container; any dependency may be injected."""

    source = build_source()
    cache = FileCacheStore(settings.get_cache_dir() or None)
    retriever = ContentRetriever(
        session=session,
        cache=cache,
        user_agent=settings.get_user_agent(),
        max_body_size=settings.get_max_body_size(),
        timeout=settings.get_http_timeout(),
    )
    parser = HearingParser(DateResolver(min_time=settings.get_min_hearing_time()))

    if repository is None:
        factory = factory or MongoClientFactory()
        repository = MongoHearingRepository(factory.get_collection())
    if publisher is None:
        publisher = TelegramPublisher(
            settings.get_telegram_token(),
            settings.get_telegram_chat_id(),
            timeout=settings.get_http_timeout(),
        )

    hearings_service = HearingsService(
        retriever=retriever,
        parser=parser,
        repository=repository,
        publisher=publisher,
        source=source,
    )

    return MercuryContainer(
        source=source,
        cache=cache,
        retriever=retriever,
        parser=parser,
        repository=repository,
        publisher=publisher,
        hearings_service=hearings_service,
    )


__all__ = ["MercuryContainer", "build_container", "build_source"]
