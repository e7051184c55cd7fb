"""Repositório de audiências com persistência em MongoDB."""
from __future__ import annotations

from typing import Iterable, Optional

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from mercury.domain import Hearing
from mercury.domain.errors import HearingNotFoundError
from mercury.domain.repositories import HearingRepository


class MongoHearingRepository(HearingRepository):
    """Gerencia a persistência de :class:`Hearing` em uma coleção MongoDB."""

    def __init__(self, collection: Collection) -> None:
        """Configura índices e guarda a coleção utilizada pelo repositório."""

        self._collection: Collection = collection
        """Coleção MongoDB responsável por armazenar as audiências."""

        self._collection.create_index([("url", 1)], unique=True, background=True)
        self._collection.create_index([("time", 1)], background=True)

    def create(self, hearing: Hearing) -> None:
        """Insere a audiência; a URL é única na coleção."""

        try:
            self._collection.insert_one(self._serialize(hearing))
        except DuplicateKeyError as exc:
            raise ValueError(f"Hearing '{hearing.url}' already exists") from exc

    def update(self, hearing: Hearing) -> None:
        """Atualiza os campos derivados mantendo os valores já gravados
        quando o novo registro os deixa vazios.

        O indicador ``published`` não é alterado aqui; use ``mark_published``.
        """

        current = self.find(hearing.url)
        if current is None:
            raise HearingNotFoundError(hearing.url)

        self._collection.update_one(
            {"url": hearing.url},
            {
                "$set": {
                    "place": hearing.place or current.place,
                    "time": hearing.time or current.time,
                    "topics": list(hearing.topics or current.topics),
                    "proposals": list(hearing.proposals or current.proposals),
                    "raw": list(hearing.raw or current.raw),
                }
            },
        )

    def find(self, url: str) -> Optional[Hearing]:
        data = self._collection.find_one({"url": url})
        if not data:
            return None
        return self._deserialize(data)

    def exists(self, url: str) -> bool:
        return self._collection.count_documents({"url": url}, limit=1) > 0

    def list_all(self) -> Iterable[Hearing]:
        """Itera sobre todas as audiências em ordem cronológica."""

        for data in self._collection.find({}).sort("time", 1):
            yield self._deserialize(data)

    def list_unpublished(self) -> Iterable[Hearing]:
        for data in self._collection.find({"published": False}).sort("time", 1):
            yield self._deserialize(data)

    def mark_published(self, urls: Iterable[str]) -> int:
        targets = list(dict.fromkeys(urls))
        if not targets:
            return 0
        result = self._collection.update_many(
            {"url": {"$in": targets}}, {"$set": {"published": True}}
        )
        return result.modified_count

    @staticmethod
    def _serialize(hearing: Hearing) -> dict:
        return hearing.to_mapping()

    @staticmethod
    def _deserialize(data: dict) -> Hearing:
        return Hearing.from_mapping({k: v for k, v in data.items() if k != "_id"})


__all__ = ["MongoHearingRepository"]
