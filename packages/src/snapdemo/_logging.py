"""Log formatting and root logger configuration.

Builder and CLI log calls attach context through ``extra=``::

    logger.debug(
        "Built result from input",
        extra={"operation": "build_from_input", "input": 3, "result": {...}},
    )

Only the keys in :data:`CONTEXT_FIELDS` are picked up.  The two output
formats render them differently:

- ``json``: one object per record, context nested under ``"context"``.
- ``text``: the usual line followed by ``key=value`` pairs; the full
  ``result`` mapping is left to the JSON format.

Logs always go to stderr so that command output on stdout stays
machine-readable.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from snapdemo._settings import LoggingSettings

CONTEXT_FIELDS = ("operation", "input", "seed", "result")

_MEGABYTE = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the builder context attached to *record*, if any."""
    return {
        name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)
    }


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields: ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``,
    ``message``, ``service``, and when present ``version``,
    ``context``, ``exception`` and ``stack_info``.
    """

    def __init__(self, *, service: str = "", version: str = "") -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }
        if self._version:
            entry["version"] = self._version

        context = record_context(record)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with trailing ``key=value`` context."""

    def __init__(self) -> None:
        super().__init__(_TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        context.pop("result", None)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
) -> None:
    """Replace the root logger's handlers according to *settings*.

    A stderr handler is always installed; ``settings.file`` adds a
    :class:`~logging.handlers.RotatingFileHandler` rotating at
    ``settings.max_file_size_mb``.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter: logging.Formatter
    if settings.format == "json":
        formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=settings.max_file_size_mb * _MEGABYTE,
                backupCount=settings.backup_count,
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(settings.level)
