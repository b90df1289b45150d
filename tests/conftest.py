# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from bob_companion.core.state import Session

from .fakes import FakeUi, MemoryTaskStore

# A fixed "now" so past-date checks do not depend on the wall clock.
NOW = datetime(2026, 1, 1, 9, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with Session and the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Bob",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def ui() -> FakeUi:
    return FakeUi()


@pytest.fixture()
def store() -> MemoryTaskStore:
    return MemoryTaskStore()


@pytest.fixture()
def session(settings: SimpleNamespace, ui: FakeUi, store: MemoryTaskStore) -> Session:
    """Session wired with deterministic fakes and a frozen clock."""
    return Session(settings=settings, storage=store, ui=ui, clock=lambda: NOW)


@pytest.fixture()
def restore_logging():
    """Undo setup_logging() so handlers do not leak between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
