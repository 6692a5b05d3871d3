"""
utils/prefs.py
Key-value preference stores used to persist manual overrides.
The override store only needs get(key) / set(key, value) on string values;
what sits behind that is up to the host.
"""

import json
import threading
from pathlib import Path
from typing import Optional

from rich.console import Console

console = Console()


class MemoryPrefs:
    """In-process preference store. Nothing survives the process."""

    def __init__(self, initial: Optional[dict] = None):
        self._data: dict = dict(initial or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str):
        self._data[key] = value


class JsonPrefs:
    """
    JSON-file-backed preference store. The whole file is one JSON object:
    { pref_key: string_value, ... }. Every set() rewrites the file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data: dict = self._load()

    def _load(self) -> dict:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                console.print(f"[yellow]⚠ Ignoring preferences file {self.path}: not a JSON object[/yellow]")
            except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
                console.print(f"[yellow]⚠ Ignoring unreadable preferences file {self.path}: {e}[/yellow]")
        return {}

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=1, ensure_ascii=False)
        tmp.replace(self.path)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str):
        """Store a value and write the file. Raises OSError if the write fails."""
        with self._lock:
            self._data[key] = value
            self._save()
