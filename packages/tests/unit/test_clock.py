"""Unit tests for snapdemo._clock — clock port and adapters.

Test Techniques Used:
    - Specification-based Testing: Verifying ClockPort protocol
      contract
    - Protocol Conformance: isinstance checks for structural
      subtyping
    - Equivalence Partitioning: Aware vs naive fixed instants
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from snapdemo._clock import ClockPort, FixedClock, SystemClock, resolve_zone


class TestSystemClock:
    """Tests for SystemClock production implementation."""

    def test_satisfies_clock_port_protocol(self) -> None:
        assert isinstance(SystemClock(), ClockPort)

    def test_now_is_aware_and_current(self) -> None:
        """now() is timezone-aware and close to the real time."""
        now = SystemClock().now()

        assert now.tzinfo is not None
        assert abs(now - datetime.now(UTC)) < timedelta(minutes=1)

    def test_now_uses_configured_zone(self) -> None:
        clock = SystemClock("Asia/Tokyo")

        assert clock.now().tzinfo == ZoneInfo("Asia/Tokyo")
        assert clock.zone == ZoneInfo("Asia/Tokyo")

    def test_unknown_zone_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown time zone"):
            SystemClock("Mars/Olympus_Mons")


class TestFixedClock:
    """Tests for FixedClock."""

    def test_satisfies_clock_port_protocol(self) -> None:
        assert isinstance(FixedClock(datetime(2022, 1, 1, tzinfo=UTC)), ClockPort)

    def test_now_is_constant(self) -> None:
        clock = FixedClock(datetime(2022, 10, 1, 10, 30, tzinfo=UTC))

        assert clock.now() == clock.now() == datetime(2022, 10, 1, 10, 30, tzinfo=UTC)

    def test_naive_instant_is_utc(self) -> None:
        clock = FixedClock(datetime(2022, 10, 1, 10, 30))

        assert clock.now() == datetime(2022, 10, 1, 10, 30, tzinfo=UTC)

    def test_instant_expressed_in_zone(self) -> None:
        """Same instant, local wall time of the configured zone."""
        clock = FixedClock(datetime(2022, 10, 1, 10, 30, tzinfo=UTC), zone="Europe/Madrid")

        now = clock.now()
        assert now.hour == 12
        assert now == datetime(2022, 10, 1, 10, 30, tzinfo=UTC)

    def test_zone_property(self) -> None:
        clock = FixedClock(datetime(2022, 10, 1, 10, 30), zone="Europe/Madrid")

        assert clock.zone == ZoneInfo("Europe/Madrid")
        assert clock.now().tzinfo == clock.zone

    def test_repr(self) -> None:
        clock = FixedClock(datetime(2022, 10, 1, 10, 30, tzinfo=UTC))

        assert repr(clock) == "FixedClock(instant='2022-10-01T10:30:00+00:00', zone='UTC')"


class TestResolveZone:
    """Tests for resolve_zone()."""

    def test_known_zone(self) -> None:
        assert resolve_zone("UTC") == ZoneInfo("UTC")

    @pytest.mark.parametrize("zone", ["Nowhere/Special", "Mars/Olympus_Mons"])
    def test_unknown_zone(self, zone: str) -> None:
        with pytest.raises(ValueError, match="Unknown time zone"):
            resolve_zone(zone)


class TestClockPortProtocol:
    """Tests for ClockPort protocol definition."""

    def test_custom_class_satisfies_protocol(self) -> None:
        class StubClock:
            def now(self) -> datetime:
                return datetime(2000, 1, 1, tzinfo=UTC)

        assert isinstance(StubClock(), ClockPort)

    def test_class_without_now_does_not_satisfy(self) -> None:
        class NotAClock:
            pass

        assert not isinstance(NotAClock(), ClockPort)
