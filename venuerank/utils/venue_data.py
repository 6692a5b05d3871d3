"""
utils/venue_data.py
Loads and indexes the bundled venue-ranking tables (SCImago journals, CORE
conferences). Each table keeps two structures:
  - direct lookup maps for the exact-match strategies
  - an ordered entry list (source-file order) for the scan strategies,
    whose first-hit-wins semantics depend on that order
Normalized forms are computed once here, not on every lookup.
"""

import json
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console

from venuerank.errors import ReferenceDataError
from venuerank.utils.text import normalize, significant_words

console = Console()

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

JOURNAL_FILE = "journal_rankings.json"
CONFERENCE_FILE = "conference_rankings.json"


@dataclass(frozen=True)
class JournalEntry:
    title: str
    tier: str          # Q1..Q4
    score: Optional[Decimal]     # SJR indicator, None when the row has none

    @property
    def rank(self) -> str:
        """Display form, e.g. "Q1 1.234". Empty when the row carries no quartile."""
        if not self.tier:
            return ""
        if self.score is None:
            return self.tier
        return f"{self.tier} {self.score}"


@dataclass(frozen=True)
class ConferenceEntry:
    title: str
    rank: str                  # A*, A, B, C, national tiers...
    acronym: Optional[str] = None


@dataclass(frozen=True)
class _IndexedConference:
    entry: ConferenceEntry
    normalized: str
    words: tuple


@dataclass(frozen=True)
class _IndexedJournal:
    entry: JournalEntry
    normalized_head: str       # title before the first comma, normalized
    words: tuple


class ConferenceTable:
    """CORE conference rankings, in source order."""

    def __init__(self, entries: Iterable[ConferenceEntry] = ()):
        self.entries: list[_IndexedConference] = []
        # normalized title → first entry with that form
        self.by_normalized: dict[str, ConferenceEntry] = {}
        for entry in entries:
            norm = normalize(entry.title)
            self.entries.append(_IndexedConference(entry, norm, tuple(significant_words(norm))))
            self.by_normalized.setdefault(norm, entry)

    @classmethod
    def from_mapping(cls, data: dict) -> "ConferenceTable":
        entries = []
        for title, info in data.items():
            info = _entry_fields(title, info)
            entries.append(ConferenceEntry(
                title=title,
                rank=_text_field(info, "rank"),
                acronym=info.get("acronym") or None,
            ))
        return cls(entries)

    def with_acronym(self, acronym: str) -> list[ConferenceEntry]:
        return [item.entry for item in self.entries if item.entry.acronym == acronym]

    def __len__(self) -> int:
        return len(self.entries)


class JournalTable:
    """SCImago journal rankings, in source order."""

    def __init__(self, entries: Iterable[JournalEntry] = ()):
        self.entries: list[_IndexedJournal] = []
        # lowercased raw title → first entry
        self.by_lower: dict[str, JournalEntry] = {}
        # normalized pre-comma title → first entry
        self.by_head: dict[str, JournalEntry] = {}
        for entry in entries:
            head = normalize(entry.title.split(",")[0].strip())
            self.entries.append(_IndexedJournal(entry, head, tuple(significant_words(head))))
            self.by_lower.setdefault(entry.title.lower(), entry)
            self.by_head.setdefault(head, entry)

    @classmethod
    def from_mapping(cls, data: dict) -> "JournalTable":
        entries = []
        for title, info in data.items():
            info = _entry_fields(title, info)
            entries.append(JournalEntry(
                title=title,
                tier=_text_field(info, "quartile"),
                score=_to_score(title, info.get("sjr")),
            ))
        return cls(entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class ReferenceTables:
    journals: JournalTable = field(default_factory=JournalTable)
    conferences: ConferenceTable = field(default_factory=ConferenceTable)

    @classmethod
    def load(cls, data_dir: Optional[Path] = None, verbose: bool = False) -> "ReferenceTables":
        data_dir = data_dir or _DATA_DIR
        journals = JournalTable.from_mapping(_load_json(data_dir / JOURNAL_FILE))
        conferences = ConferenceTable.from_mapping(_load_json(data_dir / CONFERENCE_FILE))
        if verbose:
            console.print(
                f"[dim]  Reference tables: {len(journals)} journals, "
                f"{len(conferences)} conferences loaded from {data_dir}[/dim]"
            )
        return cls(journals=journals, conferences=conferences)


def _entry_fields(title: str, info) -> dict:
    if info is None:
        return {}
    if not isinstance(info, dict):
        raise ReferenceDataError(
            f"Entry {title!r} must map to an object, got {type(info).__name__}"
        )
    return info


def _text_field(info: dict, key: str) -> str:
    """JSON null and missing keys both read as "" (unranked)."""
    value = info.get(key)
    return "" if value is None else str(value)


def _to_score(title: str, value) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ReferenceDataError(f"Entry {title!r} has a non-numeric score: {value!r}") from e


def _load_json(path: Path) -> dict:
    """Read one table file. Missing → empty (with a warning); broken → error."""
    if not path.exists():
        console.print(f"[yellow]⚠ Reference table not found: {path}[/yellow]")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise ReferenceDataError(f"Cannot read reference table {path}: {e}") from e
    if not isinstance(data, dict):
        raise ReferenceDataError(
            f"Reference table {path} must be a JSON object, got {type(data).__name__}"
        )
    return data

