"""Shared pytest fixtures for Volunteer Log tests.

Fixtures:
    - store: Empty VolunteerStore
    - sample_record: Sample VolunteerRecord
    - populated_store: Store with two registered volunteers
    - data_file: Path to a VolunteerLog.csv in a temp directory
    - mock_config: Test configuration with temp paths
"""

from pathlib import Path

import pytest

from volunteerlog.core.config import Config, reset_config
from volunteerlog.db.models import VolunteerRecord
from volunteerlog.db.store import VolunteerStore


@pytest.fixture
def store() -> VolunteerStore:
    """Empty store."""
    return VolunteerStore()


@pytest.fixture
def sample_record() -> VolunteerRecord:
    """Sample VolunteerRecord for testing."""
    return VolunteerRecord(
        name="Ana Ruiz",
        identifier="ana@x.org",
        contact="555-1111",
        total_hours=4,
    )


@pytest.fixture
def populated_store(store: VolunteerStore) -> VolunteerStore:
    """Store with two volunteers.

    Contains:
        - Ana Ruiz (ana@x.org), 4 hours
        - Ben Ortiz (ben@x.org), 0 hours
    """
    store.register("Ana Ruiz", "ana@x.org", "555-1111")
    store.log_hours("ana@x.org", "09:00", "13:00")
    store.register("Ben Ortiz", "ben@x.org", "555-2222")
    return store


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Location for a volunteer file (not created)."""
    return tmp_path / "VolunteerLog.csv"


@pytest.fixture
def mock_config(tmp_path: Path) -> Config:
    """Test configuration with temp paths."""
    return Config(
        log_path=tmp_path / "logs",
        organization_name="Test Farm",
        debug=True,
    )


@pytest.fixture(autouse=True)
def _fresh_config():
    """Drop any cached config between tests."""
    reset_config()
    yield
    reset_config()


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "gui: marks tests that import tkinter")
