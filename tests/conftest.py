"""Pytest fixtures for Māorihanga tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_maori_text():
    """Sample Māori sentence with macrons."""
    return "Mā te rā ka mōhio"


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Minimal settings.yaml in a temporary directory."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "logging:\n  level: WARNING\n  format: pretty\ndemo:\n  text: \"Kia ora\"\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def maori_lines_file(tmp_path: Path) -> Path:
    """Text file with one phrase per line."""
    path = tmp_path / "input.txt"
    path.write_text("Kia ora\nTēnā koe\n\n123\n", encoding="utf-8")
    return path


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Temporary directory for test output."""
    return tmp_path
