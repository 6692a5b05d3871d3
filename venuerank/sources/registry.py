"""
sources/registry.py
Ordered, enable-aware collection of ranking sources.
The registry holds dispatch metadata only; matching lives in the sources.
"""

from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape

from venuerank.errors import SourceRegistrationError
from venuerank.sources.base import FunctionSource, RankingSource

console = Console()


class SourceRegistry:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        # id → source, in registration order
        self._sources: dict[str, RankingSource] = {}

    def register(self, source: RankingSource):
        """
        Add a source. A second registration under the same id replaces the
        first (with a warning) and keeps its original registration slot.
        """
        if not isinstance(source, RankingSource):
            raise SourceRegistrationError(
                f"Expected a RankingSource, got {type(source).__name__}"
            )
        if not source.source_id or not source.name or not _has_match(source):
            raise SourceRegistrationError("Source registration requires id, name, and match function")

        if source.source_id in self._sources:
            console.print(
                f"[yellow]⚠ Overwriting source registration for '{escape(source.source_id)}'[/yellow]"
            )
        self._sources[source.source_id] = source

        if self.verbose:
            console.print(
                f"[dim]  Registered source '{escape(source.name)}' (priority {source.priority})[/dim]"
            )

    def enabled_sources(self) -> list[RankingSource]:
        """Enabled sources, lowest priority first; equal priorities keep registration order."""
        enabled = [s for s in self._sources.values() if s.is_enabled()]
        return sorted(enabled, key=lambda s: s.priority)

    def is_enabled(self, source_id: str) -> bool:
        source = self._sources.get(source_id)
        return source is not None and source.is_enabled()

    def get_source(self, source_id: str) -> Optional[RankingSource]:
        return self._sources.get(source_id)

    def all_ids(self) -> list[str]:
        return list(self._sources)

    def clear(self):
        self._sources.clear()
        if self.verbose:
            console.print("[dim]  Source registry cleared[/dim]")

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[RankingSource]:
        return iter(list(self._sources.values()))


def _has_match(source: RankingSource) -> bool:
    if isinstance(source, FunctionSource):
        return callable(source.match_function)
    # subclasses must provide their own match()
    return type(source).match is not RankingSource.match
