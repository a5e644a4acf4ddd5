# ============================================================================
# FILE: tests/unit/test_logging.py
# ============================================================================
"""
Unit tests for logging helpers
"""

import io
import json
import logging
import sys

import pytest

from bloodwork.utils.logging import JsonFormatter, log_performance, setup_logging


def _record(message, level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="bloodwork.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_fields():
    data = json.loads(JsonFormatter().format(_record("Extracted 3/18 parameters")))

    assert data["message"] == "Extracted 3/18 parameters"
    assert data["level"] == "INFO"
    assert data["logger"] == "bloodwork.test"
    assert data["timestamp"].endswith("+00:00")


def test_json_formatter_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record("failed", level=logging.ERROR, exc_info=sys.exc_info())

    data = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in data["exception"]


def test_json_formatter_keeps_unit_symbols():
    data = JsonFormatter().format(_record("TSH 2.5 µIU/mL"))

    assert "µIU/mL" in data


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_json_to_stream_and_file(tmp_path, restore_root_logging):
    stream = io.StringIO()
    log_file = tmp_path / "logs" / "bloodwork.log"

    setup_logging("debug", log_file=log_file, format_json=True, stream=stream)
    logging.getLogger("bloodwork.test").debug("Matched hemoglobin on line 3")

    assert logging.getLogger().level == logging.DEBUG
    assert json.loads(stream.getvalue())["message"] == "Matched hemoglobin on line 3"
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Matched hemoglobin on line 3" in log_file.read_text(encoding="utf-8")


def test_setup_logging_plain_text(restore_root_logging):
    stream = io.StringIO()

    setup_logging("WARNING", stream=stream)
    logging.getLogger("bloodwork.test").info("hidden")
    logging.getLogger("bloodwork.test").warning("Dropping unknown marker")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "bloodwork.test - WARNING - Dropping unknown marker" in output


def test_log_performance_success(caplog):
    logger = logging.getLogger("bloodwork.test.perf")

    @log_performance(logger, "Sample operation")
    def work(x):
        return x * 2

    with caplog.at_level(logging.INFO, logger="bloodwork.test.perf"):
        assert work(21) == 42

    assert "Sample operation completed in" in caplog.text
    assert work.__name__ == "work"


def test_log_performance_failure(caplog):
    logger = logging.getLogger("bloodwork.test.perf")

    @log_performance(logger, "Sample operation")
    def broken():
        raise RuntimeError("disk full")

    with caplog.at_level(logging.INFO, logger="bloodwork.test.perf"):
        with pytest.raises(RuntimeError):
            broken()

    assert "Sample operation failed after" in caplog.text
    assert "disk full" in caplog.text
