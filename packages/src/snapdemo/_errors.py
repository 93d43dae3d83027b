"""Exception types and structured error payloads.

The core raises only two domain errors:

- :class:`InvalidInputError` when ``build_from_input`` receives a
  negative repeat count.
- :class:`ResultFormatError` when a serialised result cannot be
  parsed back.

Both derive from :class:`ValueError` as well as :class:`SnapdemoError`,
so callers may catch either.

Payload schema (emitted by the CLI on stderr)::

    {
        "error_type": "invalid_input",
        "message": "Human-readable error description",
        "timestamp": "2026-02-14T12:34:56+00:00",
        "details": {}
    }
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SnapdemoError(Exception):
    """Base class for all snapdemo errors."""


class InvalidInputError(SnapdemoError, ValueError):
    """Raised when an input value is outside the accepted range."""


class ResultFormatError(SnapdemoError, ValueError):
    """Raised when a serialised result is malformed."""


DEFAULT_ERROR_TYPES: dict[type[Exception], str] = {
    InvalidInputError: "invalid_input",
    ResultFormatError: "invalid_result",
}

# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ErrorPayload:
    """Immutable structured error payload ready for JSON output."""

    error_type: str
    message: str
    timestamp: str
    details: dict[str, object] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise to a single-line JSON string."""
        return json.dumps(asdict(self))


# ---------------------------------------------------------------------------
# Payload builder
# ---------------------------------------------------------------------------


def build_error_payload(
    error: Exception,
    *,
    error_type_map: dict[type[Exception], str] | None = None,
    details: dict[str, object] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ErrorPayload:
    """Convert an exception into a structured :class:`ErrorPayload`.

    Looks up the exact class of the exception; subclasses are not matched.

    Args:
        error: The exception to convert.
        error_type_map: Mapping from exception types to machine-readable
            ``error_type`` strings.  Defaults to
            :data:`DEFAULT_ERROR_TYPES`; unmapped types become ``"error"``.
        details: Optional additional context.  Defaults to an empty dict.
        clock: Optional callable returning a :class:`~datetime.datetime`.
            Defaults to ``datetime.now(UTC)``.
    """
    resolved_map = DEFAULT_ERROR_TYPES if error_type_map is None else error_type_map
    error_type = resolved_map.get(type(error), "error")
    now = clock() if clock is not None else datetime.now(UTC)
    return ErrorPayload(
        error_type=error_type,
        message=str(error),
        timestamp=now.isoformat(),
        details=details or {},
    )
