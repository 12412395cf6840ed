# tests/conftest.py

"""Shared pytest fixtures for all inventory tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[None, None, None]:
    """Point every on-disk Settings path at a per-test temp directory."""
    saved = {
        name: getattr(Settings, name)
        for name in ("DATA_DIR", "STORAGE_PATH", "EXPORTS_DIR", "LOGS_DIR")
    }
    Settings.DATA_DIR = tmp_path / "data"
    Settings.STORAGE_PATH = tmp_path / "data" / "inventory.db"
    Settings.EXPORTS_DIR = tmp_path / "exports"
    Settings.LOGS_DIR = tmp_path / "logs"
    yield
    for name, value in saved.items():
        setattr(Settings, name, value)
