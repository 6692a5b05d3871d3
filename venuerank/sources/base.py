"""
sources/base.py
The RankingSource capability: anything with an id, a display name, a
priority, an optional enablement flag and match(title, trace) -> rank | None.
"""

from typing import Callable, Optional

from venuerank.matchers.trace import TraceSink

EnabledFlag = Callable[[], bool]
MatchFunction = Callable[[str, Optional[TraceSink]], Optional[str]]

DEFAULT_PRIORITY = 999


class RankingSource:
    """
    Base class for ranking sources held by the SourceRegistry.

    `enabled` is an external flag read at resolution time; None means the
    source is always on. Lower `priority` is checked first.
    """

    source_id: str = ""
    name: str = ""

    def __init__(self, source_id: Optional[str] = None, name: Optional[str] = None,
                 priority: Optional[int] = None, enabled: Optional[EnabledFlag] = None):
        if source_id is not None:
            self.source_id = source_id
        if name is not None:
            self.name = name
        self.priority = DEFAULT_PRIORITY if priority is None else priority
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled is None or bool(self.enabled())

    def match(self, title: str, trace: Optional[TraceSink] = None) -> Optional[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.source_id!r}, priority={self.priority})"


class FunctionSource(RankingSource):
    """A source defined by a plain match function, for ad hoc or third-party tables."""

    def __init__(self, source_id: str, name: str, match: MatchFunction,
                 priority: Optional[int] = None, enabled: Optional[EnabledFlag] = None):
        super().__init__(source_id, name, priority, enabled)
        self.match_function = match

    def match(self, title: str, trace: Optional[TraceSink] = None) -> Optional[str]:
        return self.match_function(title, trace)
