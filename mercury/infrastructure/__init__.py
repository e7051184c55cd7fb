"""Infrastructure public API for Mercury.

Exposes concrete implementations and helpers so consumers can import from
``mercury.infrastructure`` directly.
"""

from .cache import FileCacheStore, cache_key
from .database import MongoClientFactory, MongoSettings
from .publisher import TelegramPublisher
from .repositories import MongoHearingRepository
from .retriever import ContentRetriever

__all__ = [
    "ContentRetriever",
    "FileCacheStore",
    "MongoClientFactory",
    "MongoHearingRepository",
    "MongoSettings",
    "TelegramPublisher",
    "cache_key",
]
