"""
sources/journal.py
SCImago journal source. Always enabled in the default setup, checked first.
"""

from typing import Optional

from venuerank.matchers.journal import match_journal
from venuerank.matchers.trace import TraceSink, sink_or_noop
from venuerank.sources.base import EnabledFlag, RankingSource
from venuerank.utils.venue_data import JournalTable


class JournalSource(RankingSource):
    source_id = "sjr"
    name = "SCImago Journal Rankings"

    def __init__(self, table: JournalTable, priority: int = 0,
                 enabled: Optional[EnabledFlag] = None):
        super().__init__(priority=priority, enabled=enabled)
        self.table = table

    def match(self, title: str, trace: Optional[TraceSink] = None) -> Optional[str]:
        log = sink_or_noop(trace)
        log("[SJR] Trying SJR database...")
        entry = match_journal(title, self.table, trace)
        if entry is None or not entry.rank:
            # unranked rows (no quartile) count as no match
            log("[SJR] No match found")
            return None
        log(f"[SJR] ✓ MATCH: {entry.rank}")
        return entry.rank
