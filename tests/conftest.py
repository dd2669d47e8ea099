"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from tests.helpers.probes import FakeProbe


@pytest.fixture
def temp_project() -> Generator[Path, None, None]:
    """Create a temporary project directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_probe():
    """Build a FakeProbe for a set of installed commands."""
    return FakeProbe


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of config tests."""
    monkeypatch.delenv("SCRIPTRUN_VERBOSE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_log_level():
    """The CLI sets the package logger level; undo it after each test."""
    package_logger = logging.getLogger("scriptrun")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
