"""End-to-end tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from venuerank.main import main

BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "venuerank" / "data"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("VENUERANK_DATA_DIR", "VENUERANK_PREFS_FILE",
                 "VENUERANK_ENABLE_CORE", "VENUERANK_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run(tmp_path, capsys):
    """Invoke the CLI against the bundled tables and a throwaway prefs file."""
    prefs = tmp_path / "prefs.json"

    def _run(*args, data_dir=BUNDLED_DATA_DIR):
        main(["--data-dir", str(data_dir), "--prefs", str(prefs), *args])
        return capsys.readouterr().out

    return _run


# ============================================================
# resolve
# ============================================================


class TestResolveCommand:
    def test_journal(self, run):
        out = run("resolve", "IEEE Transactions on Software Engineering")
        assert "Q1 2.079" in out

    def test_several_titles(self, run):
        out = run("resolve", "Nature", "ACM SIGCOMM Conference")
        assert "Q1 18.509" in out
        assert "A*" in out

    def test_not_found(self, run):
        out = run("resolve", "Unknown Venue")
        assert "✗" in out

    def test_debug_prints_trace(self, run):
        out = run("resolve", "Nature", "--debug")
        assert "Match trace" in out
        assert "SJR exact match" in out

    def test_no_core(self, run):
        out = run("--no-core", "resolve", "ACM SIGCOMM Conference")
        assert "A*" not in out


# ============================================================
# override
# ============================================================


class TestOverrideCommand:
    def test_set_then_resolve(self, run):
        assert 'Set ranking for "My Workshop": B' in run("override", "set", "My Workshop", "B")
        out = run("resolve", "my workshop")
        assert "B" in out
        assert "(manual)" in out

    def test_list_and_clear(self, run):
        run("override", "set", "My Workshop", "B")
        assert "my workshop" in run("override", "list")
        assert "Cleared 1 manual ranking" in run("override", "clear")
        assert "No manual overrides set" in run("override", "list")

    def test_remove(self, run):
        run("override", "set", "My Workshop", "B")
        assert "Removed manual ranking" in run("override", "remove", "My Workshop")
        assert "No manual ranking for" in run("override", "remove", "My Workshop")

    def test_get_missing(self, run):
        out = run("override", "get", "My Workshop")
        assert "(manual)" not in out

    def test_blank_rank_rejected(self, run):
        with pytest.raises(SystemExit) as exc:
            run("override", "set", "My Workshop", "   ")
        assert exc.value.code == 1


# ============================================================
# check / sources
# ============================================================


class TestCheckCommand:
    def test_check_and_export(self, run, tmp_path):
        titles = tmp_path / "venues.txt"
        titles.write_text("Nature\n\nUnknown Venue\nACM SIGCOMM Conference\n", encoding="utf-8")
        export = tmp_path / "results.json"

        out = run("check", str(titles), "--export", str(export))
        assert "Checking 4 title(s)" in out
        assert "Rankings Check Complete" in out
        assert "Unknown Venue" in out

        data = json.loads(export.read_text(encoding="utf-8"))
        assert data["total"] == 4
        assert data["found"] == 2
        assert data["not_found"] == 1
        assert data["skipped"] == 1
        assert data["rankings"] == {"Nature": "Q1 18.509", "ACM SIGCOMM Conference": "A*"}
        assert data["not_found_titles"] == ["Unknown Venue"]

    def test_empty_file(self, run, tmp_path):
        titles = tmp_path / "venues.txt"
        titles.write_text("", encoding="utf-8")
        assert "No titles to check" in run("check", str(titles))

    def test_missing_file(self, run, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run("check", str(tmp_path / "nope.txt"))
        assert exc.value.code == 1


class TestSourcesCommand:
    def test_lists_sources(self, run):
        out = run("sources")
        assert "sjr" in out
        assert "core" in out
        assert "yes" in out

    def test_disabled_core_shown(self, run):
        out = run("--no-core", "sources")
        assert "yes" in out
        assert "no" in out


class TestStartupErrors:
    def test_broken_reference_table(self, run, tmp_path):
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "journal_rankings.json").write_text("{broken", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            run("sources", data_dir=data_dir)
        assert exc.value.code == 1

    def test_subcommand_required(self, run):
        with pytest.raises(SystemExit) as exc:
            run()
        assert exc.value.code == 2
