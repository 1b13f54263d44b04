"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, error_category, severity, path, method,
      status_code) surfaced when present; unknown extras dropped
    - Logs written to stdout (startup message included)

Design Decisions:
    - One JSON object per line so container log collectors can index the
      error_code of every 404/400 without parsing free text
    - "text" format for local runs, where the startup line is read by a person
    - setup_logging called once on startup via lifespan; returns its handler
      so callers (tests) can detach it
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

_EXTRA_FIELDS = (
    "error_code", "error_category", "severity", "path", "method", "status_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "INFO", fmt: str = "json", stream: TextIO | None = None,
) -> logging.Handler:
    """Configure root logging for the application and return the new handler."""
    handler = logging.StreamHandler(stream or sys.stdout)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
