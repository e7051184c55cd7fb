"""API pública do domínio do Mercury.

O módulo centraliza entidades, erros, portas e repositórios para que possam
ser importados diretamente de ``mercury.domain``.
"""

from .entities import Hearing, HearingSource, Selector, escape_markdown
from .errors import (
    CacheError,
    EmptyContentError,
    FetchError,
    HearingNotFoundError,
    ImplausibleDateError,
    MercuryError,
    NoTopicsError,
    ParseError,
    PlaceTimeError,
    PublishError,
    TopicSplitError,
)
from .ports import HearingPublisher
from .repositories import HearingRepository

__all__ = [
    "CacheError",
    "EmptyContentError",
    "FetchError",
    "Hearing",
    "HearingNotFoundError",
    "HearingPublisher",
    "HearingRepository",
    "HearingSource",
    "ImplausibleDateError",
    "MercuryError",
    "NoTopicsError",
    "ParseError",
    "PlaceTimeError",
    "PublishError",
    "Selector",
    "TopicSplitError",
    "escape_markdown",
]
