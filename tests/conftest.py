# tests/conftest.py - shared corpus fixtures

import pytest

from autocorrector import Autocorrector, AutocorrectorConfig, CorpusIndex

SCENARIO_TEXT = "the quick brown fox jumps over the lazy dog . the brown fox is quick .\n"


@pytest.fixture
def scenario_path(tmp_path):
    p = tmp_path / "scenario.txt"
    p.write_text(SCENARIO_TEXT, encoding="utf-8")
    return p


@pytest.fixture
def scenario_index(scenario_path):
    return CorpusIndex.build([scenario_path])


@pytest.fixture
def make_ac(scenario_index):
    """Autocorrector over the scenario corpus with the given flags."""

    def _make(prefix=False, whitespace=False, led=0):
        cfg = AutocorrectorConfig(prefix_enabled=prefix, whitespace_enabled=whitespace, edit_distance=led)
        return Autocorrector(scenario_index, cfg)

    return _make


@pytest.fixture
def write_corpus(tmp_path):
    """Write `text` to a fresh file under tmp_path and return its path."""
    counter = {"n": 0}

    def _write(text, name=None):
        counter["n"] += 1
        p = tmp_path / (name or f"corpus_{counter['n']}.txt")
        p.write_text(text, encoding="utf-8")
        return p

    return _write
