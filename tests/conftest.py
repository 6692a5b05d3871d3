"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from venuerank.config import Config
from venuerank.overrides import OverrideStore
from venuerank.resolver import RankingResolver
from venuerank.sources import ConferenceSource, JournalSource, SourceRegistry
from venuerank.utils.prefs import MemoryPrefs
from venuerank.utils.venue_data import ConferenceTable, JournalTable, ReferenceTables

BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "venuerank" / "data"

# ============================================================
# Reference tables
# ============================================================

CONFERENCES = {
    "ACM Conference on Computer and Communications Security": {"rank": "A*", "acronym": "CCS"},
    "ACM SIGCOMM Conference": {"rank": "A*", "acronym": "SIGCOMM"},
    "Annual Meeting of the Association for Computational Linguistics": {"rank": "A*", "acronym": "ACL"},
    "International Conference on Software Engineering": {"rank": "A*", "acronym": "ICSE"},
    "International Conference on Information Systems": {"rank": "A*", "acronym": "ICIS"},
    "IEEE International Conference on Intelligent Systems": {"rank": "C", "acronym": "ICIS"},
    "International Symposium on Software Testing and Analysis": {"rank": "A", "acronym": "ISSTA"},
    "Workshop on Hot Topics in Networks": {"rank": "A", "acronym": "HOTNETS"},
}

JOURNALS = {
    "IEEE Transactions on Software Engineering": {"quartile": "Q1", "sjr": 2.079},
    "Data and Knowledge Engineering": {"quartile": "Q2", "sjr": 0.621},
    "Proceedings - International Conference on Software Engineering, ICSE": {"quartile": "Q1", "sjr": 1.201},
    "IEEE Transactions on Pattern Analysis and Machine Intelligence": {"quartile": "Q1", "sjr": 6.158},
    "Nature": {"quartile": "Q1", "sjr": 18.509},
    "Telecommunication Systems": {"quartile": "Q2", "sjr": 0.646},
}


@pytest.fixture
def conference_table() -> ConferenceTable:
    return ConferenceTable.from_mapping(CONFERENCES)


@pytest.fixture
def journal_table() -> JournalTable:
    return JournalTable.from_mapping(JOURNALS)


@pytest.fixture
def bundled_tables() -> ReferenceTables:
    return ReferenceTables.load(BUNDLED_DATA_DIR)


# ============================================================
# Resolver wiring
# ============================================================


@pytest.fixture
def prefs() -> MemoryPrefs:
    return MemoryPrefs()


@pytest.fixture
def flags() -> dict:
    """Mutable enablement flags, read by sources at resolution time."""
    return {"core": True}


@pytest.fixture
def resolver(journal_table, conference_table, prefs, flags) -> RankingResolver:
    registry = SourceRegistry()
    registry.register(JournalSource(journal_table, priority=0))
    registry.register(ConferenceSource(conference_table, priority=100,
                                       enabled=lambda: flags["core"]))
    return RankingResolver(registry, OverrideStore(prefs))


@pytest.fixture
def config(tmp_path) -> Config:
    cfg = Config()
    cfg.data_dir = BUNDLED_DATA_DIR
    cfg.prefs_file = tmp_path / "prefs.json"
    cfg.enable_core = True
    cfg.verbose = False
    return cfg
