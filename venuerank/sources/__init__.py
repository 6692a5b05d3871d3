"""Ranking sources and the registry that orders them."""

from venuerank.sources.base import DEFAULT_PRIORITY, FunctionSource, RankingSource
from venuerank.sources.conference import ConferenceSource
from venuerank.sources.journal import JournalSource
from venuerank.sources.registry import SourceRegistry

__all__ = [
    "DEFAULT_PRIORITY", "FunctionSource", "RankingSource",
    "ConferenceSource", "JournalSource", "SourceRegistry",
]
