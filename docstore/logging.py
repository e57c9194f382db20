from __future__ import annotations

import json
import logging
import os

# Extra fields attached by the store's log calls.
_EVENT_FIELDS = ("event_type", "document_id", "match_count", "error_category")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying the store's event fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short
        payload: dict[str, object] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EVENT_FIELDS:
            payload[key] = getattr(record, key, None)
        if payload["event_type"] is None:
            payload["event_type"] = record.getMessage()
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Configure root logging.

    ``level`` falls back to ``LOG_LEVEL`` and then ``INFO``; ``fmt`` falls back
    to ``LOG_FORMAT`` and then ``plain``. Any other format than ``json`` is
    treated as plain text.
    """

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    fmt = (fmt or os.getenv("LOG_FORMAT", "plain")).lower()

    if fmt == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
