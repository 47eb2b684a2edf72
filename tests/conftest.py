"""
Pytest configuration and shared fixtures.
"""

import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pytest

from gml_theory.exchange import AppRegistry, MemoryStore
from gml_theory.knowledge import KnowledgeBase, default_knowledge
from gml_theory.tables import TheoryTables, default_tables


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def tables() -> TheoryTables:
    """The built-in scale and chord tables."""
    return default_tables()


@pytest.fixture
def knowledge() -> KnowledgeBase:
    """The built-in knowledge base."""
    return default_knowledge()


@pytest.fixture
def store() -> MemoryStore:
    """An empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def registry() -> AppRegistry:
    """The built-in app registry with production URLs."""
    return AppRegistry.load()


@pytest.fixture
def fixed_clock():
    """A clock frozen at 2024-01-02 03:04:05.678 UTC."""
    moment = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
    return lambda: moment
