"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, status_code, duration_ms, user_id) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - setup_logging runs on every lifespan startup and replaces its own handler
    - Session ids are never logged (they are bearer credentials)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code", "path", "method", "status_code", "duration_ms", "user_id",
)
HANDLER_MARKER = "_accounts_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application.

    Replaces the handler installed by a previous call.
    """
    for existing in list(logging.root.handlers):
        if getattr(existing, HANDLER_MARKER, False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    setattr(handler, HANDLER_MARKER, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
