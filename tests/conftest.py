"""Shared pytest fixtures for IslandXP tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from islandxp import settings as settings_module
from islandxp.progression.curve import build_from_settings
from islandxp.progression.engine import ProgressionEngine
from islandxp.settings import CurveSettings


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Point every test at a throwaway settings file."""
    path = tmp_path / "curve.json"
    monkeypatch.setattr(settings_module, "SETTINGS_PATH", path)
    yield path


@pytest.fixture(scope="session")
def table():
    """The default curve, built once."""
    return build_from_settings(CurveSettings())


@pytest.fixture
def engine(qapp, table):
    """Fresh ProgressionEngine at level 1 / 0 XP."""
    return ProgressionEngine(parent=None, table=table)
