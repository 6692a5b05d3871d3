"""
resolver.py
Top-level venue → rank resolution.

  1. A manual override for the title wins outright.
  2. Otherwise each enabled source is asked in priority order;
     the first non-empty answer is the result.
  3. Otherwise the venue is unranked (None).
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from venuerank.matchers.trace import TraceSink, sink_or_noop
from venuerank.overrides import OverrideStore, override_key
from venuerank.sources.base import RankingSource
from venuerank.sources.conference import ConferenceSource
from venuerank.sources.journal import JournalSource
from venuerank.sources.registry import SourceRegistry
from venuerank.utils.prefs import JsonPrefs, MemoryPrefs
from venuerank.utils.venue_data import ReferenceTables


@dataclass
class CheckSummary:
    """Outcome of checking a batch of venue titles."""
    total: int = 0
    found: int = 0
    not_found: int = 0
    skipped: int = 0
    not_found_titles: list[str] = field(default_factory=list)
    results: dict = field(default_factory=dict)   # title → rank (found titles only)

    def first_not_found(self, limit: int = 10) -> list[str]:
        return self.not_found_titles[:limit]


class RankingResolver:
    def __init__(self, registry: Optional[SourceRegistry] = None,
                 overrides: Optional[OverrideStore] = None):
        self.registry = registry if registry is not None else SourceRegistry()
        self.overrides = overrides if overrides is not None else OverrideStore(MemoryPrefs())

    def resolve(self, title: str, trace: Optional[TraceSink] = None) -> Optional[str]:
        log = sink_or_noop(trace)

        override = self.overrides.get(title)
        if override is not None:
            log(f'Manual override for "{override_key(title)}": {override}')
            return override

        sources = self.registry.enabled_sources()
        log(f"Checking {len(sources)} enabled source(s): "
            f"{', '.join(s.source_id for s in sources) or '(none)'}")
        for source in sources:
            rank = source.match(title, trace)
            if rank:
                log(f"Resolved by {source.name}: {rank}")
                return rank
        log(f'No ranking found for "{title}"')
        return None

    def check(self, titles: Iterable[str]) -> CheckSummary:
        """Resolve many titles; blank titles are counted as skipped."""
        summary = CheckSummary()
        for title in titles:
            summary.total += 1
            if not title or not title.strip():
                summary.skipped += 1
                continue
            title = title.strip()
            rank = self.resolve(title)
            if rank:
                summary.found += 1
                summary.results[title] = rank
            else:
                summary.not_found += 1
                summary.not_found_titles.append(title)
        return summary

    # ── Caller surface ────────────────────────────────────────────────────────

    def register_source(self, source: RankingSource):
        self.registry.register(source)

    def set_override(self, title: str, rank: str):
        self.overrides.set(title, rank)

    def remove_override(self, title: str):
        self.overrides.remove(title)

    def get_override(self, title: str) -> Optional[str]:
        return self.overrides.get(title)

    def has_override(self, title: str) -> bool:
        return self.overrides.has(title)

    def override_count(self) -> int:
        return self.overrides.count()

    def clear_overrides(self):
        self.overrides.clear_all()


def build_resolver(config, tables=None, prefs=None) -> RankingResolver:
    """
    Wire the default deployment: SJR (always on) then CORE (behind
    config.enable_core), overrides persisted in config.prefs_file.
    """
    tables = tables or ReferenceTables.load(config.data_dir, verbose=config.verbose)
    prefs = prefs if prefs is not None else JsonPrefs(config.prefs_file)

    registry = SourceRegistry(verbose=config.verbose)
    registry.register(JournalSource(tables.journals, priority=config.journal_priority))
    registry.register(ConferenceSource(tables.conferences, priority=config.conference_priority,
                                       enabled=lambda: config.enable_core))

    overrides = OverrideStore(prefs, pref_key=config.overrides_pref_key, verbose=config.verbose)
    return RankingResolver(registry, overrides)
