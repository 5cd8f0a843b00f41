"""Pytest configuration and shared fixtures for the Bracket Calculator tests."""

import os
from pathlib import Path

import pytest

# Qt widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config_manager at an empty temporary directory so tests never touch the shipped settings."""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    monkeypatch.setenv("BRACKET_CALCULATOR_CONFIG", str(settings_dir))
    return settings_dir
