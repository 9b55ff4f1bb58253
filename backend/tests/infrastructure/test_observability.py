"""Structured logging — JSON formatter output."""

import json
import logging

from accounts.infrastructure.observability import (
    HANDLER_MARKER, JSONFormatter, setup_logging,
)


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "accounts.test", logging.INFO, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_core_fields_as_json():
    log = json.loads(JSONFormatter().format(_record("hello")))
    assert log["level"] == "INFO"
    assert log["logger"] == "accounts.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(
        "requestTime", status_code=204, duration_ms=1.5, session_id="secret",
    )))
    assert log["status_code"] == 204
    assert log["duration_ms"] == 1.5
    assert "session_id" not in log


def test_setup_logging_twice_keeps_a_single_handler():
    original = list(logging.root.handlers)
    original_level = logging.root.level
    try:
        setup_logging("INFO", "json")
        setup_logging("DEBUG", "text")

        ours = [h for h in logging.root.handlers if getattr(h, HANDLER_MARKER, False)]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.handlers[:] = original
        logging.root.setLevel(original_level)
