"""Tests for logging and I/O utilities."""

import json
import logging

from maorihanga.models import Layout
from maorihanga.utils.io import read_jsonl, read_lines, write_jsonl
from maorihanga.utils.log import (
    JSONFormatter,
    log_with_context,
    setup_from_settings,
    setup_logging,
)


def test_write_and_read_jsonl(temp_dir):
    """Test JSONL writing keeps non-ASCII text."""
    path = temp_dir / "out" / "records.jsonl"
    count = write_jsonl(path, iter([{"source": "ka", "maorihanga": "(ㄱㅏ)"}]))

    assert count == 1
    assert "(ㄱㅏ)" in path.read_text(encoding="utf-8")
    assert list(read_jsonl(path)) == [{"source": "ka", "maorihanga": "(ㄱㅏ)"}]
    assert not list(path.parent.glob(".tmp.*"))


def test_read_lines(maori_lines_file):
    """Test line reading strips newlines."""
    assert read_lines(maori_lines_file) == ["Kia ora", "Tēnā koe", "", "123"]


def test_json_formatter_extra_fields():
    """Test that context fields land in the JSON record."""
    record = logging.LogRecord("maorihanga", logging.INFO, __file__, 1, "hello", None, None)
    record.extra_fields = {"syllables": 3}

    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["syllables"] == 3
    assert data["timestamp"].endswith("Z")


def test_setup_logging_file(temp_dir):
    """Test that file logs are written as JSON lines."""
    log_file = temp_dir / "logs" / "maorihanga.log"
    logger = setup_logging(level="INFO", log_file=log_file)

    log_with_context(logger, "info", "done", layout=Layout.STACKED, count=2)
    for handler in logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    data = json.loads(line)
    assert data["message"] == "done"
    assert data["count"] == 2


def test_setup_from_settings(temp_dir):
    """Test level and file resolution from settings."""
    logger = setup_from_settings({"level": "ERROR", "file": "app.log"}, temp_dir)
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 2

    logger = setup_from_settings({"level": "ERROR"}, temp_dir, verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_from_empty_settings(temp_dir):
    """Test that an empty logging section falls back to defaults."""
    logger = setup_from_settings(None, temp_dir)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
