"""Contrato de persistência para audiências públicas."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from mercury.domain.entities import Hearing


class HearingRepository(ABC):
    """Define as operações de armazenamento indexadas pela URL do anúncio."""

    @abstractmethod
    def create(self, hearing: Hearing) -> None:
        """Gravar uma nova audiência; URLs repetidas geram ``ValueError``."""

    @abstractmethod
    def update(self, hearing: Hearing) -> None:
        """Atualizar os campos derivados de uma audiência existente."""

    @abstractmethod
    def find(self, url: str) -> Optional[Hearing]:
        """Buscar uma audiência pela URL de origem."""

    @abstractmethod
    def exists(self, url: str) -> bool:
        """Verificar se a URL já foi armazenada."""

    @abstractmethod
    def list_all(self) -> Iterable[Hearing]:
        """Listar todas as audiências em ordem cronológica."""

    @abstractmethod
    def list_unpublished(self) -> Iterable[Hearing]:
        """Listar as audiências que ainda não foram publicadas."""

    @abstractmethod
    def mark_published(self, urls: Iterable[str]) -> int:
        """Marcar as URLs informadas como publicadas e retornar o total alterado."""
