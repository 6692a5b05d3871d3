"""
matchers/trace.py
Match tracing. A trace sink is any callable taking one message string;
MatchTrace is the default one and simply records messages in order.
"""

from typing import Callable, Iterator, Optional

TraceSink = Callable[[str], None]


class MatchTrace:
    """Append-only record of strategy attempts for one or more resolutions."""

    def __init__(self):
        self._messages: list[str] = []

    def __call__(self, message: str):
        self._messages.append(message)

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, fragment: str) -> bool:
        return any(fragment in m for m in self._messages)


def _discard(message: str):
    pass


def sink_or_noop(trace: Optional[TraceSink]) -> TraceSink:
    """Return the given sink, or a no-op so matchers can call it unconditionally."""
    return trace if trace is not None else _discard
