"""
utils/text.py
Title canonicalization shared by every matcher.

  normalize()        — lowercase, expand '&', strip punctuation, collapse spaces
  clean_title()      — drop venue boilerplate (Proceedings of, years, ordinals)
  extract_acronym()  — pull "(CCS)"-style short codes out of a title
  significant_words()— tokens longer than 3 chars, used by overlap strategies
"""

import re
from typing import Optional

# Letters/digits only as neighbours; "_" is punctuation here too
_TELECOM_RE = re.compile(r"(?<![^\W_])telecomm?unications?(?![^\W_])")
# Anything that is not a letter, digit or whitespace (underscore counts as punctuation)
_PUNCT_RE = re.compile(r"[^\w\s]|_")
_SPACE_RE = re.compile(r"\s+")

# Applied in this order by clean_title()
_CLEAN_STEPS = (
    re.compile(r"^Proceedings of the\s+", re.IGNORECASE),
    re.compile(r"^[A-Z]+\s+[0-9]{4}\s+-\s+", re.IGNORECASE),      # "CCS 2023 - "
    re.compile(r"\b[0-9]{4}\b"),                                   # bare ASCII years
    re.compile(r"\b[0-9]{1,2}(st|nd|rd|th)\s+(Annual\s+)?", re.IGNORECASE),
    re.compile(r"\bAnnual\s+", re.IGNORECASE),
    re.compile(r"\s+-\s+[A-Z]+\s+'?[0-9]{2,4}\s*$", re.IGNORECASE),  # " - CCS '23"
)

_ACRONYM_RE = re.compile(r"\(([A-Z][A-Z0-9&]+)\)")

MIN_WORD_LENGTH = 4


def normalize(text: str) -> str:
    """
    Canonical form used for every equality / overlap comparison.
    Total over any string; idempotent.
    """
    s = text.lower()
    s = s.replace("&", "and")
    s = _TELECOM_RE.sub("communications", s)
    s = _PUNCT_RE.sub(" ", s)
    s = _SPACE_RE.sub(" ", s)
    return s.strip()


def clean_title(title: str) -> str:
    """
    Strip structural noise from a venue title before normalization.
    Lossy on purpose: "Proceedings of the 25th Annual ACM SIGCOMM 2023 Conference"
    becomes "ACM SIGCOMM Conference".
    """
    cleaned = title
    for pattern in _CLEAN_STEPS:
        cleaned = pattern.sub("", cleaned)
        cleaned = _SPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


def extract_acronym(title: str) -> Optional[str]:
    """Return the first parenthesized all-caps code, e.g. "(CCS)" → "CCS"."""
    match = _ACRONYM_RE.search(title)
    return match.group(1) if match else None


def significant_words(normalized: str) -> list[str]:
    """Whitespace tokens of a normalized string longer than 3 characters."""
    return [w for w in normalized.split(" ") if len(w) >= MIN_WORD_LENGTH]


def meets_ratio(matched: int, total: int, percent: int) -> bool:
    """matched / total >= percent / 100, computed without float rounding."""
    return total > 0 and matched * 100 >= percent * total


def ratio(matched: int, total: int) -> float:
    return matched / total if total else 0.0
