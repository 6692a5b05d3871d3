"""
matchers/journal.py
Resolve a journal title against the SCImago table.

Strategies, in order:
  1. exact         — case-insensitive equality with a table title (no cleaning)
  2. fuzzy         — cleaned+normalized input equals the normalized table title
                     up to its first comma (drops ", ACRONYM" / publisher suffixes)
  3. word overlap  — >=85% of the table title's significant words present AND
                     >=80% of the input's; table title needs >=5 such words
"""

from typing import Optional

from venuerank.matchers.trace import TraceSink, sink_or_noop
from venuerank.utils.text import clean_title, meets_ratio, normalize, ratio, significant_words
from venuerank.utils.venue_data import JournalEntry, JournalTable

MIN_FUZZY_LENGTH = 10         # strictly longer than this
MIN_OVERLAP_WORDS = 5
TABLE_OVERLAP_PERCENT = 85
INPUT_OVERLAP_PERCENT = 80


def match_journal(title: str, table: JournalTable,
                  trace: Optional[TraceSink] = None) -> Optional[JournalEntry]:
    """Return the matching journal entry (tier + SJR score), or None."""
    log = sink_or_noop(trace)
    log(f'SJR matching: "{title}"')

    entry = _exact(title, table, log)
    if entry is not None:
        return entry

    cleaned = normalize(clean_title(title))
    return _fuzzy(cleaned, table, log) or _word_overlap(cleaned, table, log)


def _exact(title: str, table: JournalTable, log: TraceSink) -> Optional[JournalEntry]:
    search = title.lower()
    log(f'  SJR Strategy 1: Trying exact match (lowercase): "{search}"')
    entry = table.by_lower.get(search)
    if entry is not None:
        log(f'  ✓ SJR exact match: "{entry.title}" -> {entry.rank}')
        return entry
    log("  No SJR exact match")
    return None


def _fuzzy(cleaned: str, table: JournalTable, log: TraceSink) -> Optional[JournalEntry]:
    log(f'  SJR Strategy 2: Trying fuzzy match: "{cleaned}"')
    if len(cleaned) <= MIN_FUZZY_LENGTH:
        log(f"  Skipped: cleaned title is {len(cleaned)} chars (needs > {MIN_FUZZY_LENGTH})")
        return None
    entry = table.by_head.get(cleaned)
    if entry is not None:
        log(f'  ✓ SJR fuzzy match: "{entry.title}" -> {entry.rank}')
        return entry
    log("  No SJR fuzzy match")
    return None


def _word_overlap(cleaned: str, table: JournalTable, log: TraceSink) -> Optional[JournalEntry]:
    search_words = significant_words(cleaned)
    search_set = set(search_words)
    log(f'  SJR Strategy 3: Trying word overlap: cleaned="{cleaned}", '
        f"words=[{', '.join(search_words)}]")

    best = None
    for item in table.entries:
        total = len(item.words)
        if total < MIN_OVERLAP_WORDS:
            continue
        matched = sum(1 for w in item.words if w in search_set)
        if not matched:
            continue
        table_ok = meets_ratio(matched, total, TABLE_OVERLAP_PERCENT)
        search_ok = meets_ratio(matched, len(search_words), INPUT_OVERLAP_PERCENT)
        if table_ok and search_ok:
            log(f'  ✓ SJR word overlap match: "{item.entry.title}" -> {item.entry.rank}')
            log(f"    Matched {matched}/{total} SJR words ({ratio(matched, total):.0%}), "
                f"{matched}/{len(search_words)} search words "
                f"({ratio(matched, len(search_words)):.0%})")
            return item.entry
        if best is None or ratio(matched, total) > best[0]:
            best = (ratio(matched, total), matched, total, item.entry.title)

    if best is not None:
        log(f'  No SJR word overlap match (closest: "{best[3]}", '
            f"{best[1]}/{best[2]} SJR words ({best[0]:.0%}), "
            f"{best[1]}/{len(search_words)} search words "
            f"({ratio(best[1], len(search_words)):.0%}))")
    else:
        log(f"  No SJR word overlap match (checked {len(table)} entries)")
    return None
