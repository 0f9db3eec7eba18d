"""Logging setup for Tweenease.

Library modules never configure logging themselves. They log lookup misses at
DEBUG through module loggers, optionally bound to the curve identifier with
:func:`get_logger`. Host applications call :func:`configure_logging` once to
route those records to stdout or a file, as text or as JSON lines.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attribute names of a bare LogRecord. Anything beyond these arrived via `extra`.
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Example line for a failed name lookup::

        {"level": "DEBUG", "message": "No easing curve named 'inside'",
         "timestamp": "2026-01-29T12:00:00+00:00",
         "context": {"logger_name": "tweenease.core.curves.registry",
                     "function": "resolve_by_name", "line": 120, "curve": "inside"}}
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_FIELDS and not key.startswith("_")
        )
        if record.exc_info:
            context["exception"] = self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def _make_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename)
    return logging.StreamHandler(sys.stdout)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Route log records to stdout or a file.

    Safe to call more than once; each call replaces the root handlers.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format. Ignored when ``structured`` is set.
        filename: Log file path. Logs go to stdout when None.
        structured: Emit JSON lines instead of text.

    Raises:
        ValueError: If ``level`` is not a logging level name.
    """
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown log level: {level}")

    handler = _make_handler(filename)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=level_value, handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Get a logger, bound to ``context`` when any is given.

    Bound context lands on every record as extra attributes, so the structured
    formatter reports it, e.g. ``get_logger(__name__, curve="in_cubic")``.
    """
    logger = logging.getLogger(name)
    if context:
        return logging.LoggerAdapter(logger, context)
    return logger
