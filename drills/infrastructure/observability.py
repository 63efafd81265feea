"""Structured Logging — JSON formatter and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (exercise, error_code, delay_ms) surfaced when present
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for a handful of fields
    - Handler tagged with an attribute so re-setup replaces instead of appending
"""

import logging
import json
from datetime import datetime, timezone

from drills.config import Settings


EXTRA_FIELDS = ("exercise", "error_code", "delay_ms", "input_repr")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

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


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_drills_handler", False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._drills_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings) -> logging.Handler:
    """setup_logging with log_level / log_format taken from Settings."""
    return setup_logging(settings.log_level, settings.log_format)
