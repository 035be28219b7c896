"""
Structured JSON logging for promptcraft.

One JSON object per line, tagged with the application name and the source
location of the call. Logs go to stderr by default so that stdout carries
nothing but completions.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_QUIET_LOGGERS = ("httpx", "httpcore", "openai")


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def __init__(self, app_name: str) -> None:
        super().__init__()
        self._app = app_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self._app,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }

        # extra={"_extra": {...}} carries structured context (see factory.py)
        extra = getattr(record, "_extra", None)
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def resolve_level(level_name: str | None) -> int:
    """Map a level name (or LOG_LEVEL) to a logging level; unknown names mean INFO."""
    name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    app_name: str = "promptcraft",
    level_name: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Route the root logger through JSONFormatter.

    Called once by the CLI after settings load. Replaces any handlers already
    on the root logger and returns the application logger.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter(app_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level_name))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger(app_name)
