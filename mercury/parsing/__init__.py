"""Extração de campos estruturados a partir dos parágrafos de um anúncio."""
from .dates import (
    EPOCH_THRESHOLD,
    CompositeLine,
    DateResolver,
    extract_composite,
)
from .normalization import clean_line, collapse_whitespace
from .parser import HearingParser, TopicBoundary, find_proposals, find_topic_boundary

__all__ = [
    "CompositeLine",
    "DateResolver",
    "EPOCH_THRESHOLD",
    "HearingParser",
    "TopicBoundary",
    "clean_line",
    "collapse_whitespace",
    "extract_composite",
    "find_proposals",
    "find_topic_boundary",
]
