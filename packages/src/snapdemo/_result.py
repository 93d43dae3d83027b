"""Immutable result record produced by :class:`ResultBuilder`.

A :class:`Result` carries exactly four values: an integer, a float,
a string and a local date-time.  It is built fresh on every call and
compared by value only.

Serialised shape (field names kept stable so recorded snapshots
remain comparable)::

    {
      "oneInteger": 3,
      "oneDouble": 11.100000000000001,
      "oneString": "aaa",
      "oneDateTime": "2022-05-03T13:46:18"
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from snapdemo._errors import ResultFormatError

_FIELDS = ("oneInteger", "oneDouble", "oneString", "oneDateTime")


@dataclass(frozen=True, slots=True)
class Result:
    """Immutable value object with one value of each kind."""

    one_integer: int
    one_double: float
    one_string: str
    one_date_time: datetime

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping using the serialised field names."""
        return {
            "oneInteger": self.one_integer,
            "oneDouble": self.one_double,
            "oneString": self.one_string,
            "oneDateTime": self.one_date_time.isoformat(),
        }

    def to_json(self) -> str:
        """Serialise to pretty-printed JSON, newline-terminated."""
        return json.dumps(self.to_dict(), indent=2) + "\n"

    def to_text(self) -> str:
        """Plain one-line representation, e.g. for terminal output."""
        fields = ", ".join(f"{key}={value}" for key, value in self.to_dict().items())
        return f"Result({fields})"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result:
        """Rebuild a :class:`Result` from :meth:`to_dict` output.

        Raises:
            ResultFormatError: If a field is missing or has the wrong
                type, or the date-time is not valid ISO 8601.
        """
        missing = [key for key in _FIELDS if key not in data]
        if missing:
            raise ResultFormatError(f"Missing result fields: {', '.join(missing)}")

        one_integer = data["oneInteger"]
        one_double = data["oneDouble"]
        one_string = data["oneString"]
        one_date_time = data["oneDateTime"]

        # bool is an int subclass but never a valid count
        if not isinstance(one_integer, int) or isinstance(one_integer, bool):
            raise ResultFormatError(f"oneInteger must be an integer, got {one_integer!r}")
        if not isinstance(one_double, int | float) or isinstance(one_double, bool):
            raise ResultFormatError(f"oneDouble must be a number, got {one_double!r}")
        if not isinstance(one_string, str):
            raise ResultFormatError(f"oneString must be a string, got {one_string!r}")
        if not isinstance(one_date_time, str):
            raise ResultFormatError(
                f"oneDateTime must be an ISO 8601 string, got {one_date_time!r}"
            )
        try:
            parsed = datetime.fromisoformat(one_date_time)
        except ValueError as exc:
            raise ResultFormatError(
                f"oneDateTime is not ISO 8601: {one_date_time!r}"
            ) from exc

        return cls(
            one_integer=one_integer,
            one_double=float(one_double),
            one_string=one_string,
            one_date_time=parsed,
        )

    @classmethod
    def from_json(cls, raw: str) -> Result:
        """Parse :meth:`to_json` output back into a :class:`Result`."""
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ResultFormatError(f"Invalid result JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ResultFormatError("Result JSON must be an object")
        return cls.from_dict(data)
