"""Shared pytest fixtures for IntervalTimer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from intervaltimer.database.db import configure_engine, init_db
from intervaltimer.settings import ConfigurationStore
from intervaltimer.timer.clock import ClockDriver
from intervaltimer.timer.engine import TimerEngine
from intervaltimer.timer.models import TimerConfiguration


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return ConfigurationStore()


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with the default configuration (1:00 / 0:05)."""
    return TimerEngine(parent=None, clock=ClockDriver())


@pytest.fixture
def make_engine(qapp):
    """Factory for engines with a given main duration and get-ready offset."""

    def _make(main: int, get_ready: int, store=None) -> TimerEngine:
        return TimerEngine(
            parent=None,
            config=TimerConfiguration(main, get_ready),
            clock=ClockDriver(),
            store=store,
        )

    return _make
