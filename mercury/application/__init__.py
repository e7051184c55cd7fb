"""Serviços de aplicação do Mercury."""
from .hearings_service import CollectionResult, HearingsService, LinkFailure

__all__ = ["CollectionResult", "HearingsService", "LinkFailure"]
