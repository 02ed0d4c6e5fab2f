"""Tests for structured logging."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from happify.config import TestConfig
from happify.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="happify.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Streak computed",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    return logging.LogRecord(**defaults)


def test_json_formatter_basic_fields():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "happify.test"
    assert log_data["message"] == "Streak computed"
    assert log_data["line"] == 42
    assert "timestamp" in log_data


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.user_id = "user-1"
    record.current = 4

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"user_id": "user-1", "current": 4}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Invalid log date: 'x'")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Invalid log date" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_setup_logging_writes_json_file(tmp_path):
    config = TestConfig(data_dir=tmp_path)

    logger = setup_logging(config)
    logger.warning("Something to record")
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == "happify"
    assert len(logger.handlers) == 2

    log_file = tmp_path / "logs" / "happify.log"
    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    messages = [json.loads(line)["message"] for line in lines]
    assert "Logging initialized" in messages
    assert "Something to record" in messages


def test_setup_logging_is_idempotent(tmp_path):
    config = TestConfig(data_dir=tmp_path)

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_console_level_by_mode(tmp_path, dev_mode):
    config = TestConfig(data_dir=tmp_path)
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(console) == 1
    assert console[0].level == (logging.INFO if dev_mode else logging.WARNING)


def test_get_logger_namespaces():
    assert get_logger("streaks").name == "happify.streaks"
    assert get_logger("happify.services.streaks").name == "happify.services.streaks"
