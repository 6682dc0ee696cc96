# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events, stores and planners for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.models import Event, Day
from src.services.storage import MemoryKeyValueStore
from src.services.background_writer import BackgroundWriter
from src.services.snapshot_service import SnapshotService
from src.core.planner import Planner


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event():
    """Factory for events with sensible defaults."""
    def _make(title="Piano", day=Day.MONDAY, start="09:00", end="10:00", **kwargs):
        return Event(title=title, day=day, start=start, end=end, **kwargs)
    return _make


@pytest.fixture
def school_event():
    return Event(
        id="school",
        title="School",
        day=Day.MONDAY,
        start="08:00",
        end="15:00",
        category="School",
        color="#2563eb",
        notes="Bring lunch",
    )


@pytest.fixture
def football_event():
    return Event(
        id="football",
        title="Football",
        day=Day.WEDNESDAY,
        start="16:00",
        end="17:30",
        category="Sport",
        color="#22c55e",
        notes='Coach "Sam", field 2',
    )


@pytest.fixture
def five_events(make_event):
    return [
        make_event(title=f"Event {i}", day=day, start=f"{9 + i:02d}:00", end=f"{10 + i:02d}:00")
        for i, day in enumerate([Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.FRIDAY, Day.SUNDAY])
    ]


# ==================== Persistence Fixtures ====================

@pytest.fixture
def memory_store():
    return MemoryKeyValueStore()


@pytest.fixture
def writer():
    background = BackgroundWriter()
    yield background
    background.close()


@pytest.fixture
def snapshot(memory_store, writer):
    return SnapshotService(memory_store, writer)


@pytest.fixture
def planner(memory_store, writer):
    """A planner hydrated from an empty in-memory store."""
    return Planner.open(memory_store, writer)
