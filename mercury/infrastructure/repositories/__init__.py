"""Implementações de repositórios baseadas em MongoDB."""

from .mongo_hearing_repository import MongoHearingRepository

__all__ = ["MongoHearingRepository"]
