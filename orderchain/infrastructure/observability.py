"""Structured Logging — JSON output for applications that want orderchain's build-time records.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (step, criterion, error_code) surfaced when present
    - The library only emits records; handlers are attached by the application

Design Decisions:
    - Combinators log one DEBUG record per built step with step/criterion extras;
      the formatter lifts those extras into top-level JSON keys
    - A logged OrderchainError contributes its code and step when the record lacks them
    - configure_logging() reads Settings so ORDERCHAIN_LOG_* env vars take effect
"""

import json
import logging
from datetime import datetime, timezone

from orderchain.config import Settings, get_settings
from orderchain.core.errors import OrderchainError

CHAIN_EXTRAS = ("step", "criterion", "error_code")


class JSONFormatter(logging.Formatter):
    """One JSON object per record; chain extras become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key)) for key in CHAIN_EXTRAS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, OrderchainError):
                payload.setdefault("error_code", exc.code)
                if exc.context.step is not None:
                    payload.setdefault("step", exc.context.step)
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=repr)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the root logger. Returns the handler."""
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


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
