"""Interfaces de repositório utilizadas pela camada de domínio."""
from .hearing_repository import HearingRepository

__all__ = ["HearingRepository"]
