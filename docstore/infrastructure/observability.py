"""Structured Logging — JSON formatter and setup for docstore observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (collection, doc_id, path, depth, generation, error_code)
      surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - Field list matches the extra= keys the core passes (store, collection, teardown)
    - setup_logging returns its handler so callers and tests can detach it
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "collection", "doc_id", "path", "depth", "generation", "error_code",
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
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application. Returns the installed handler."""
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
