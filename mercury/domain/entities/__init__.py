"""Entidades de domínio utilizadas na coleta de audiências públicas."""
from .hearing import Hearing, escape_markdown
from .selector import Selector
from .source import HearingSource

__all__ = ["Hearing", "HearingSource", "Selector", "escape_markdown"]
