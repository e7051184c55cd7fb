"""Mongo database utilities."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient

_DEFAULT_URI = "mongodb://localhost:27017/"


@dataclass
class MongoSettings:
    uri: str
    database: str
    collection: str = "hearings"

    @classmethod
    def from_env(cls) -> "MongoSettings":
        return cls(
            uri=os.getenv("MONGO_URI", _DEFAULT_URI),
            database=os.getenv("MONGO_DATABASE", "mercury"),
            collection=os.getenv("MONGO_COLLECTION", "hearings"),
        )


class MongoClientFactory:
    """Creates a single lazily-connected Mongo client per settings object."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None

    @property
    def settings(self) -> MongoSettings:
        return self._settings

    def create_client(self) -> MongoClient:
        if not self._client:
            self._client = MongoClient(self._settings.uri)
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        return client[self._settings.database]

    def get_collection(self) -> Any:
        return self.get_database()[self._settings.collection]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
