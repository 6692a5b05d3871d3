"""
matchers/conference.py
Resolve a conference title against the CORE table.

Strategies, tried strictly in order (first success wins, table order breaks ties):
  1. exact          — normalized cleaned title equals a normalized CORE title
  2. substring      — CORE title (>20 chars) found inside the input
  3. reverse        — input (>20 chars) found inside a CORE title
  4. word overlap   — >=80% of a CORE title's significant words present (needs >=4 words)
  5. acronym        — "(ABCD)" code of >=4 chars shared by exactly one CORE entry
"""

from typing import Optional

from venuerank.matchers.trace import TraceSink, sink_or_noop
from venuerank.utils.text import (
    clean_title, extract_acronym, meets_ratio, normalize, ratio, significant_words,
)
from venuerank.utils.venue_data import ConferenceTable

MIN_SUBSTRING_LENGTH = 20     # strictly longer than this
MIN_OVERLAP_WORDS = 4
OVERLAP_PERCENT = 80
MIN_ACRONYM_LENGTH = 4


def match_conference(title: str, table: ConferenceTable,
                     trace: Optional[TraceSink] = None) -> Optional[str]:
    """Return the CORE rank for `title`, or None."""
    log = sink_or_noop(trace)

    cleaned = clean_title(title)
    normalized = normalize(cleaned)
    acronym = extract_acronym(title)

    log(f'Matching: "{title}"')
    log(f'  Cleaned: "{cleaned}"')
    log(f'  Normalized: "{normalized}"')
    log(f"  Acronym: {acronym or '(none)'}")

    for strategy in (_exact, _substring, _reverse_substring, _word_overlap):
        rank = strategy(normalized, table, log)
        if rank is not None:
            return rank
    return _acronym(acronym, table, log)


def _exact(normalized: str, table: ConferenceTable, log: TraceSink) -> Optional[str]:
    log("  CORE Strategy 1: Trying exact normalized match")
    if normalized:
        entry = table.by_normalized.get(normalized)
        if entry is not None:
            log(f'  ✓ CORE exact match: "{entry.title}" ({entry.rank})')
            return entry.rank
    log("  No CORE exact match")
    return None


def _substring(normalized: str, table: ConferenceTable, log: TraceSink) -> Optional[str]:
    log("  CORE Strategy 2: Trying substring (CORE in input)")
    for item in table.entries:
        if len(item.normalized) > MIN_SUBSTRING_LENGTH and item.normalized in normalized:
            log(f'  ✓ CORE substring match: "{item.entry.title}" ({item.entry.rank})')
            log(f'    "{item.normalized}" found in "{normalized}"')
            return item.entry.rank
    log("  No CORE substring match")
    return None


def _reverse_substring(normalized: str, table: ConferenceTable, log: TraceSink) -> Optional[str]:
    log("  CORE Strategy 3: Trying reverse substring (input in CORE)")
    if len(normalized) <= MIN_SUBSTRING_LENGTH:
        log(f"  Skipped: input is {len(normalized)} chars (needs > {MIN_SUBSTRING_LENGTH})")
        return None
    for item in table.entries:
        if normalized in item.normalized:
            log(f'  ✓ CORE reverse substring match: "{item.entry.title}" ({item.entry.rank})')
            log(f'    "{normalized}" found in "{item.normalized}"')
            return item.entry.rank
    log("  No CORE reverse substring match")
    return None


def _word_overlap(normalized: str, table: ConferenceTable, log: TraceSink) -> Optional[str]:
    input_words = set(significant_words(normalized))
    log(f"  CORE Strategy 4: Trying word overlap, words=[{', '.join(sorted(input_words))}]")

    best = None  # (ratio, matched, total, title) of the closest miss, for the trace
    for item in table.entries:
        total = len(item.words)
        if total < MIN_OVERLAP_WORDS:
            continue
        matched = sum(1 for w in item.words if w in input_words)
        if meets_ratio(matched, total, OVERLAP_PERCENT):
            log(f'  ✓ CORE word overlap match: "{item.entry.title}" ({item.entry.rank})')
            log(f"    Matched {matched}/{total} words ({ratio(matched, total):.0%})")
            return item.entry.rank
        if matched and (best is None or ratio(matched, total) > best[0]):
            best = (ratio(matched, total), matched, total, item.entry.title)

    if best is not None:
        log(f'  No CORE word overlap match (closest: "{best[3]}", '
            f"{best[1]}/{best[2]} words, {best[0]:.0%} < {OVERLAP_PERCENT}%)")
    else:
        log("  No CORE word overlap match")
    return None


def _acronym(acronym: Optional[str], table: ConferenceTable, log: TraceSink) -> Optional[str]:
    if not acronym:
        return None
    if len(acronym) < MIN_ACRONYM_LENGTH:
        log(f'  CORE Strategy 5: Skipping acronym match "{acronym}" '
            f"(< {MIN_ACRONYM_LENGTH} chars, too ambiguous)")
        return None

    log(f'  CORE Strategy 5: Trying acronym match "{acronym}"')
    candidates = table.with_acronym(acronym)
    if len(candidates) == 1:
        entry = candidates[0]
        log(f'  ✓ CORE acronym match (unique): "{entry.title}" ({entry.rank})')
        return entry.rank
    if candidates:
        log(f'  ✗ CORE acronym ambiguous: {len(candidates)} conferences share acronym "{acronym}":')
        for entry in candidates:
            log(f'    - "{entry.title}" ({entry.rank})')
    else:
        log(f'  No CORE acronym match for "{acronym}"')
    return None
