"""Porta de saída responsável por entregar anúncios renderizados."""
from __future__ import annotations

from abc import ABC, abstractmethod


class HearingPublisher(ABC):
    """Define como uma mensagem já renderizada é enviada para fora do sistema."""

    @abstractmethod
    def publish(self, message: str) -> None:
        """Enviar a mensagem; falhas devem ser sinalizadas com ``PublishError``."""
