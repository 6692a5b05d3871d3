"""
sources/conference.py
CORE conference source. Optional (bound to a config flag), checked after SJR.
"""

from typing import Optional

from venuerank.matchers.conference import match_conference
from venuerank.matchers.trace import TraceSink, sink_or_noop
from venuerank.sources.base import EnabledFlag, RankingSource
from venuerank.utils.venue_data import ConferenceTable


class ConferenceSource(RankingSource):
    source_id = "core"
    name = "CORE Conference Rankings"

    def __init__(self, table: ConferenceTable, priority: int = 100,
                 enabled: Optional[EnabledFlag] = None):
        super().__init__(priority=priority, enabled=enabled)
        self.table = table

    def match(self, title: str, trace: Optional[TraceSink] = None) -> Optional[str]:
        log = sink_or_noop(trace)
        log("[CORE] Trying CORE database...")
        rank = match_conference(title, self.table, trace)
        if not rank:
            log("[CORE] No match found")
            return None
        log(f"[CORE] ✓ MATCH: {rank}")
        return rank
