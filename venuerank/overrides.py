"""
overrides.py
User-defined manual ranking overrides.

Keys are publication titles lowercased and trimmed (punctuation kept).
The in-memory map is the source of truth for the session; every change is
written through to the preference store as one JSON snapshot under a single
key. A lock covers each mutate-then-save cycle so concurrent writers cannot
persist a stale snapshot over a newer one.
"""

import json
import threading
from typing import Optional

from rich.console import Console

console = Console()

DEFAULT_PREF_KEY = "manualOverrides"


def override_key(title: str) -> str:
    return title.lower().strip()


class OverrideStore:
    def __init__(self, prefs, pref_key: str = DEFAULT_PREF_KEY, verbose: bool = False):
        self.prefs = prefs
        self.pref_key = pref_key
        self.verbose = verbose
        self._lock = threading.RLock()
        self._overrides: dict[str, str] = {}
        self.load()

    # ── Persistence ───────────────────────────────────────────────────────────

    def load(self):
        """(Re)load overrides from the preference store. Bad data resets to empty."""
        with self._lock:
            raw = self.prefs.get(self.pref_key) or "{}"
            raw = raw.strip() if isinstance(raw, str) else raw
            if not raw or raw == "{}":
                self._overrides = {}
                return
            try:
                parsed = json.loads(raw)
                if not isinstance(parsed, dict) or not all(
                    isinstance(k, str) and isinstance(v, str) for k, v in parsed.items()
                ):
                    raise ValueError("expected a flat object of string → string")
            except (TypeError, ValueError) as e:
                # json.JSONDecodeError is a ValueError
                console.print(f"[red]✗ Error loading manual overrides: {e}[/red]")
                self._overrides = {}
                self._reset_persisted()
                return
            self._overrides = dict(parsed)
            if self.verbose:
                console.print(f"[dim]  Loaded {len(self._overrides)} manual overrides[/dim]")

    def _reset_persisted(self):
        try:
            self.prefs.set(self.pref_key, "{}")
        except OSError as e:
            console.print(f"[red]✗ Could not reset stored manual overrides: {e}[/red]")

    def _save(self):
        try:
            self.prefs.set(self.pref_key, json.dumps(self._overrides, ensure_ascii=False))
        except OSError as e:
            console.print(f"[red]✗ Error saving manual overrides: {e}[/red]")
            return
        if self.verbose:
            console.print(f"[dim]  Saved {len(self._overrides)} manual overrides[/dim]")

    # ── Mutations ─────────────────────────────────────────────────────────────

    def set(self, title: str, rank: str):
        with self._lock:
            self._overrides[override_key(title)] = rank
            self._save()
        if self.verbose:
            console.print(f'[dim]  Set manual override for "{title}" -> "{rank}"[/dim]')

    def remove(self, title: str):
        with self._lock:
            self._overrides.pop(override_key(title), None)
            self._save()
        if self.verbose:
            console.print(f'[dim]  Removed manual override for "{title}"[/dim]')

    def clear_all(self):
        with self._lock:
            self._overrides.clear()
            self._save()
        if self.verbose:
            console.print("[dim]  Cleared all manual overrides[/dim]")

    # ── Queries ───────────────────────────────────────────────────────────────

    def get(self, title: str) -> Optional[str]:
        return self._overrides.get(override_key(title))

    def has(self, title: str) -> bool:
        return override_key(title) in self._overrides

    def count(self) -> int:
        return len(self._overrides)

    def items(self) -> list[tuple[str, str]]:
        """Sorted (key, rank) snapshot."""
        with self._lock:
            return sorted(self._overrides.items())
