"""
config.py — VenueRank configuration
Edit this file or use environment variables to configure the tool.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

# Load .env from project root (one level above the package)
from dotenv import load_dotenv
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)

_PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
_DEFAULT_PREFS_FILE = Path.home() / ".venuerank" / "prefs.json"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class Config:
    # ── Reference tables ──────────────────────────────────────────────────────
    # Directory holding journal_rankings.json and conference_rankings.json
    data_dir: Path = field(default_factory=lambda: Path(
        os.environ.get("VENUERANK_DATA_DIR", str(_PACKAGE_DATA_DIR))))

    # ── Preferences / manual overrides ────────────────────────────────────────
    prefs_file: Path = field(default_factory=lambda: Path(
        os.environ.get("VENUERANK_PREFS_FILE", str(_DEFAULT_PREFS_FILE))))
    overrides_pref_key: str = "manualOverrides"

    # ── Ranking sources ───────────────────────────────────────────────────────
    # The journal source is always on; CORE can be switched off
    enable_core: bool = field(default_factory=lambda: _env_flag("VENUERANK_ENABLE_CORE", True))
    journal_priority: int = 0       # checked first
    conference_priority: int = 100  # checked after journals

    # ── Output ────────────────────────────────────────────────────────────────
    verbose: bool = field(default_factory=lambda: _env_flag("VENUERANK_VERBOSE", False))
    not_found_display_limit: int = 10   # titles listed after a bulk check

    def validate(self):
        if not self.overrides_pref_key:
            raise ValueError("overrides_pref_key must not be empty")
        if self.not_found_display_limit < 0:
            raise ValueError(
                f"not_found_display_limit must be >= 0, got {self.not_found_display_limit}"
            )
        if self.data_dir.exists() and not self.data_dir.is_dir():
            raise ValueError(f"data_dir is not a directory: {self.data_dir}")
