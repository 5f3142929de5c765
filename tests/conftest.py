"""Shared pytest fixtures for all tests."""

import io
import os
import tempfile
from typing import Callable, Generator, List

import pyperclip
import pytest

from passman.config import config
from passman.models import AccountEntry
from passman.store import RecordStore

# ============================================================================
# File System Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Provide a temporary directory that's automatically cleaned up."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def database_path(temp_dir: str) -> str:
    """Provide a temporary database file path."""
    return os.path.join(temp_dir, "database.json")


@pytest.fixture
def use_database(monkeypatch, database_path: str) -> str:
    """Point the active configuration at the temporary database."""
    monkeypatch.setattr(config, "database_path", database_path)
    return database_path


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def sample_entries() -> List[AccountEntry]:
    """Two entries with distinct account names."""
    return [
        AccountEntry("github", "alice", "a@x.com", "gh-secret"),
        AccountEntry("Gmail", "alice.b", "alice@gmail.com", "mail-secret"),
    ]


@pytest.fixture
def store(database_path: str) -> RecordStore:
    """Provide an initialized, empty store."""
    record_store = RecordStore(database_path)
    record_store.ensure_initialized()
    return record_store


@pytest.fixture
def store_with_entries(
    store: RecordStore, sample_entries: List[AccountEntry]
) -> RecordStore:
    """Provide a store holding the sample entries."""
    store.save(sample_entries)
    return store


# ============================================================================
# Interaction Fixtures
# ============================================================================


@pytest.fixture
def feed_input(monkeypatch) -> Callable[..., None]:
    """Replace stdin with the given lines."""

    def _feed(*lines: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))

    return _feed


@pytest.fixture
def clipboard(monkeypatch) -> List[str]:
    """Capture clipboard writes instead of touching the real clipboard."""
    copied: List[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied
