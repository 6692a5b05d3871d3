"""Tests for overrides.py and the preference stores behind it."""

from __future__ import annotations

import json
import threading

from venuerank.overrides import DEFAULT_PREF_KEY, OverrideStore, override_key
from venuerank.utils.prefs import JsonPrefs, MemoryPrefs


class FailingPrefs(MemoryPrefs):
    def set(self, key, value):
        raise OSError("disk full")


def _persisted(prefs) -> dict:
    return json.loads(prefs.get(DEFAULT_PREF_KEY))


# ============================================================
# Keys
# ============================================================


class TestOverrideKey:
    def test_lowercased_and_trimmed(self):
        assert override_key("  My Workshop ") == "my workshop"

    def test_punctuation_kept(self):
        assert override_key("Proc. ACM-Workshop!") == "proc. acm-workshop!"
        assert override_key("Proc. ACM-Workshop!") != override_key("Proc ACM Workshop")


# ============================================================
# Mutations & queries
# ============================================================


class TestOverrideStore:
    def test_set_then_get_is_case_insensitive(self, prefs):
        store = OverrideStore(prefs)
        store.set("My Workshop", "B")
        assert store.get("my workshop") == "B"
        assert store.get("  MY WORKSHOP  ") == "B"
        assert store.has("My Workshop")
        assert store.count() == 1

    def test_set_replaces(self, prefs):
        store = OverrideStore(prefs)
        store.set("My Workshop", "B")
        store.set("my workshop", "A")
        assert store.get("My Workshop") == "A"
        assert store.count() == 1

    def test_every_change_is_persisted(self, prefs):
        store = OverrideStore(prefs)
        store.set("My Workshop", "B")
        store.set("Other Venue", "Q2")
        assert _persisted(prefs) == {"my workshop": "B", "other venue": "Q2"}

        store.remove("My Workshop")
        assert _persisted(prefs) == {"other venue": "Q2"}

        store.clear_all()
        assert _persisted(prefs) == {}
        assert store.count() == 0

    def test_remove_missing_is_noop(self, prefs):
        store = OverrideStore(prefs)
        store.remove("never set")
        assert store.count() == 0
        assert store.get("never set") is None
        assert not store.has("never set")

    def test_items_sorted(self, prefs):
        store = OverrideStore(prefs)
        store.set("Zeta", "C")
        store.set("alpha", "A")
        assert store.items() == [("alpha", "A"), ("zeta", "C")]

    def test_custom_pref_key(self, prefs):
        store = OverrideStore(prefs, pref_key="myOverrides")
        store.set("Venue", "A")
        assert json.loads(prefs.get("myOverrides")) == {"venue": "A"}
        assert prefs.get(DEFAULT_PREF_KEY) is None

    def test_save_failure_keeps_memory_state(self, capsys):
        store = OverrideStore(FailingPrefs())
        store.set("Venue", "A")
        assert store.get("venue") == "A"
        assert "Error saving manual overrides" in capsys.readouterr().out

    def test_concurrent_writers_persist_everything(self, prefs):
        store = OverrideStore(prefs)

        def writer(n):
            for i in range(25):
                store.set(f"venue {n}-{i}", "B")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.count() == 200
        assert len(_persisted(prefs)) == 200


# ============================================================
# Loading
# ============================================================


class TestLoad:
    def test_loads_existing_snapshot(self):
        prefs = MemoryPrefs({DEFAULT_PREF_KEY: '{"my workshop": "B"}'})
        store = OverrideStore(prefs)
        assert store.get("My Workshop") == "B"

    def test_missing_and_empty_values(self):
        assert OverrideStore(MemoryPrefs()).count() == 0
        assert OverrideStore(MemoryPrefs({DEFAULT_PREF_KEY: ""})).count() == 0
        assert OverrideStore(MemoryPrefs({DEFAULT_PREF_KEY: " {} "})).count() == 0

    def test_corrupt_snapshot_resets(self, capsys):
        prefs = MemoryPrefs({DEFAULT_PREF_KEY: "{not json"})
        store = OverrideStore(prefs)
        assert store.count() == 0
        assert prefs.get(DEFAULT_PREF_KEY) == "{}"
        assert "Error loading manual overrides" in capsys.readouterr().out

    def test_non_flat_snapshot_resets(self, capsys):
        prefs = MemoryPrefs({DEFAULT_PREF_KEY: '{"venue": {"rank": "A"}}'})
        store = OverrideStore(prefs)
        assert store.count() == 0
        assert prefs.get(DEFAULT_PREF_KEY) == "{}"
        assert "Error loading" in capsys.readouterr().out

    def test_list_snapshot_resets(self):
        prefs = MemoryPrefs({DEFAULT_PREF_KEY: '["A", "B"]'})
        assert OverrideStore(prefs).count() == 0
        assert prefs.get(DEFAULT_PREF_KEY) == "{}"

    def test_reload_picks_up_external_change(self, prefs):
        store = OverrideStore(prefs)
        prefs.set(DEFAULT_PREF_KEY, '{"venue": "C"}')
        store.load()
        assert store.get("Venue") == "C"


# ============================================================
# JSON preference file
# ============================================================


class TestJsonPrefs:
    def test_round_trip_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        OverrideStore(JsonPrefs(path)).set("My Workshop", "B")

        assert path.exists()
        on_disk = json.loads(path.read_text(encoding="utf-8"))
        assert json.loads(on_disk[DEFAULT_PREF_KEY]) == {"my workshop": "B"}

        reopened = OverrideStore(JsonPrefs(path))
        assert reopened.get("my workshop") == "B"

    def test_other_keys_preserved(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        OverrideStore(JsonPrefs(path)).set("Venue", "A")
        on_disk = json.loads(path.read_text(encoding="utf-8"))
        assert on_disk["theme"] == "dark"
        assert DEFAULT_PREF_KEY in on_disk

    def test_unreadable_file_ignored(self, tmp_path, capsys):
        path = tmp_path / "prefs.json"
        path.write_text("{{{", encoding="utf-8")
        prefs = JsonPrefs(path)
        assert prefs.get(DEFAULT_PREF_KEY) is None
        assert "Ignoring unreadable preferences file" in capsys.readouterr().out

    def test_non_object_file_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonPrefs(path).get("anything", "fallback") == "fallback"
