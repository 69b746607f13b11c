# =============================================================================
# tests/conftest.py
# Pytest Configuration and Fixtures
# =============================================================================

import json
from typing import List
from unittest.mock import MagicMock

import pytest

from agriscan_core.data import Disease, Vendor
from agriscan_core.offline import LocalStorage, NetworkMonitor


# =============================================================================
# TEST DOUBLES
# =============================================================================

class ScriptedRng:
    """
    Stand-in for numpy's Generator that replays fixed draws.

    ``random()`` pops from ``randoms``; ``integers()`` pops from ``integers``.
    Running out of values fails the test loudly.
    """

    def __init__(self, randoms=(), integers=()):
        self.randoms: List[float] = list(randoms)
        self.integer_draws: List[int] = list(integers)
        self.calls: List[str] = []

    def random(self):
        self.calls.append("random")
        return self.randoms.pop(0)

    def integers(self, low, high=None):
        self.calls.append("integers")
        value = self.integer_draws.pop(0)
        assert low <= value < high
        return value


class RecordingSleep:
    """Sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


# =============================================================================
# INFRASTRUCTURE FIXTURES
# =============================================================================

@pytest.fixture
def storage(tmp_path):
    """SQLite local storage in a temp directory"""
    store = LocalStorage(tmp_path / "local" / "agriscan.db")
    yield store
    store.close()


@pytest.fixture
def online_monitor():
    return NetworkMonitor(initial_online=True)


@pytest.fixture
def offline_monitor():
    return NetworkMonitor(initial_online=False)


@pytest.fixture
def no_sleep():
    return RecordingSleep()


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances"""
    return ScriptedRng


@pytest.fixture
def fixed_clock():
    return lambda: 1700000000.5


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_diseases():
    """Three diseases, one per severity"""
    return [
        Disease(
            id="d1",
            name="Rice Blast",
            description="Fungal disease with diamond-shaped lesions",
            symptoms=["Diamond lesions", "Neck rot"],
            solutions=["Apply tricyclazole"],
            prevention=["Resistant varieties"],
            severity="High",
            common_areas=["Central Luzon"],
        ),
        Disease(
            id="d2",
            name="Bacterial Leaf Blight",
            description="Bacterial disease after heavy rain",
            symptoms=["Yellow stripes"],
            solutions=["Drain the field"],
            prevention=["Clean water"],
            severity="Medium",
            common_areas=["Bicol Region"],
        ),
        Disease(
            id="d3",
            name="Brown Spot",
            description="Linked to poor soil fertility",
            symptoms=["Brown oval spots"],
            solutions=["Add potassium"],
            prevention=["Seed treatment"],
            severity="Low",
            common_areas=[],
        ),
    ]


@pytest.fixture
def sample_vendors():
    return [
        Vendor(id="v1", name="Nueva Ecija Agri Supply", address="Cabanatuan City",
               contact="+63449401234", email="sales@ne.ph",
               services="Fungicides and spraying", specialties=["Rice Blast"],
               rating=4.7, verified=True, region="Central Luzon"),
        Vendor(id="v2", name="Bicol Crop Care", address="Naga City",
               contact="+63544731122", email="info@bicol.ph",
               services="Bactericides", specialties=["Tungro Virus", "Insecticide"],
               rating=4.0, verified=True, region="Bicol Region"),
        Vendor(id="v3", name="Tarlac Farm Depot", address="Tarlac City",
               contact="+63459820000", email="depot@tarlac.ph",
               services="Seeds and fertilizer", specialties=["Fertilizer"],
               rating=3.5, verified=False, region="Central Luzon"),
    ]


@pytest.fixture
def sample_dictionary():
    return {
        "rice": "bigas",
        "disease": "sakit",
        "leaf": "dahon",
        "healthy": "malusog",
        "plant": "halaman",
    }


@pytest.fixture
def data_dir(tmp_path, sample_diseases, sample_vendors, sample_dictionary):
    """A content directory with the three bundled JSON documents"""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "diseases.json").write_text(
        json.dumps([d.to_dict() for d in sample_diseases]), encoding="utf-8")
    (directory / "vendors.json").write_text(
        json.dumps([v.to_dict() for v in sample_vendors]), encoding="utf-8")
    (directory / "translations.json").write_text(
        json.dumps({k.upper(): v for k, v in sample_dictionary.items()}), encoding="utf-8")
    return directory


# =============================================================================
# MOCK FIXTURES
# =============================================================================

@pytest.fixture
def mock_streamlit(monkeypatch):
    """Replace the ``st`` handle used by the error handlers"""
    from agriscan_core.errors import handlers

    mock_st = MagicMock()
    mock_st.session_state = {}
    monkeypatch.setattr(handlers, "st", mock_st)
    return mock_st
