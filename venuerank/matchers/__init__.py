"""Per-table matching strategies (CORE conferences, SCImago journals)."""

from venuerank.matchers.conference import match_conference
from venuerank.matchers.journal import match_journal
from venuerank.matchers.trace import MatchTrace

__all__ = ["match_conference", "match_journal", "MatchTrace"]
