"""Portas que conectam o domínio com outros serviços e adaptadores."""
from .hearing_publisher import HearingPublisher

__all__ = ["HearingPublisher"]
