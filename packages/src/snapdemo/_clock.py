"""Wall-clock port with system and fixed adapters.

Provides :class:`ClockPort` (Protocol), :class:`SystemClock` for real
time and :class:`FixedClock` for reproducible runs.

Both adapters return timezone-aware datetimes in a configured IANA
zone.  Consumers that need a local date-time (the builder does) drop
the zone *after* conversion.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def resolve_zone(zone: str) -> ZoneInfo:
    """Look up an IANA time zone by name.

    Raises:
        ValueError: If *zone* is not a known time zone.
    """
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone: {zone!r}") from exc


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current date-time.

    The default implementation wraps ``datetime.now()``.  Tests
    inject :class:`FixedClock` for reproducible timestamps.
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Production clock reporting real time in a given zone.

    Satisfies :class:`ClockPort` via structural subtyping.

    Usage::

        clock = SystemClock("Europe/Madrid")
        clock.now()  # datetime(..., tzinfo=ZoneInfo('Europe/Madrid'))
    """

    def __init__(self, zone: str = "UTC") -> None:
        self._zone = resolve_zone(zone)

    @property
    def zone(self) -> ZoneInfo:
        """Zone that :meth:`now` reports in."""
        return self._zone

    def now(self) -> datetime:
        """Return the current wall-clock time in this clock's zone."""
        return datetime.now(self._zone)

    def __repr__(self) -> str:
        return f"SystemClock(zone={self._zone.key!r})"


class FixedClock:
    """Clock that always reports the same instant.

    Args:
        instant: The instant to report.  A naive datetime is taken
            to be UTC.
        zone: IANA zone the instant is expressed in.

    Example::

        clock = FixedClock(datetime(2022, 10, 1, 10, 30, tzinfo=UTC))
        assert clock.now() == clock.now()
    """

    def __init__(self, instant: datetime, zone: str = "UTC") -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._zone = resolve_zone(zone)
        self._instant = instant.astimezone(self._zone)

    @property
    def zone(self) -> ZoneInfo:
        """Zone the fixed instant is expressed in."""
        return self._zone

    def now(self) -> datetime:
        """Return the fixed instant in this clock's zone."""
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock(instant={self._instant.isoformat()!r}, zone={self._zone.key!r})"
