"""Structured Logging: JSON formatter and setup for the user fetcher.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, user_id, page, attempt, ...) surfaced when present
    - Exceptions rendered under "exception" when exc_info is set
    - A UserFetcherError in exc_info is also rendered under "error" via to_dict():
      code, category, status_code (HTTP errors) and the ErrorContext fields
    - setup_logging is idempotent: it replaces the handler it installed earlier
"""

import json
import logging
from datetime import datetime, timezone

from user_fetcher.core.errors import UserFetcherError

EXTRA_KEYS = (
    "operation", "user_id", "page", "attempt", "delay_seconds",
    "status_code", "url", "error_code", "cache_key",
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
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
            exc = record.exc_info[1]
            if isinstance(exc, UserFetcherError):
                log["error"] = exc.to_dict()["error"]
        return json.dumps(log, ensure_ascii=False, default=str)


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging; returns the installed handler."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
