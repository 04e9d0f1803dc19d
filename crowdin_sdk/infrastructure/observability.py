"""Structured Logging — JSON formatter and setup for SDK diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (resource, query, status_code, error_code) surfaced when present
    - The SDK only emits DEBUG records; handlers are installed by the application

Design Decisions:
    - JSONFormatter on stdlib logging: zero extra dependencies, full control over keys
    - setup_logging is opt-in, called once by the embedding application
"""

import json
import logging
from datetime import datetime, timezone

from crowdin_sdk.config import Settings


EXTRA_KEYS = ("resource", "query", "status_code", "error_code")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach one stream handler to the root logger and return it."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings) -> logging.Handler:
    """Configure logging from CROWDIN_LOG_LEVEL / CROWDIN_LOG_FORMAT."""
    return setup_logging(settings.log_level, settings.log_format)
