"""Mercury - coletor de audiências públicas de urbanismo."""
from .application import CollectionResult, HearingsService
from .container import build_container
from .domain import Hearing, HearingSource, Selector
from .parsing import DateResolver, HearingParser

__all__ = [
    "CollectionResult",
    "DateResolver",
    "Hearing",
    "HearingParser",
    "HearingSource",
    "HearingsService",
    "Selector",
    "build_container",
]
