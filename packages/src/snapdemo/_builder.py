"""Result builder — the core of snapdemo.

:class:`ResultBuilder` produces a :class:`~snapdemo._result.Result`
either deterministically from an explicit input or from its injected
random and clock sources.

The random source is consumed in a fixed order (integer, double,
bounded integer), so a builder wired with a seeded source and a fixed
clock yields the same sequence of results on every run.  The builder
holds no lock: callers sharing one across threads must serialise
access themselves.
"""

from __future__ import annotations

import logging
from datetime import datetime

from snapdemo._clock import ClockPort
from snapdemo._errors import InvalidInputError
from snapdemo._random import RandomPort
from snapdemo._result import Result

logger = logging.getLogger(__name__)

DOUBLE_FACTOR = 3.7
REPEATED_CHAR = "a"
MAX_RANDOM_LENGTH = 10
FIXED_DATE_TIME = datetime(2022, 5, 3, 13, 46, 18)


class ResultBuilder:
    """Build :class:`Result` values from an input or from injected sources.

    Args:
        random: Random source, used read-only as a dependency but
            advanced by every :meth:`build_from_sources` call.
        clock: Clock source read by :meth:`build_from_sources`.
    """

    def __init__(self, random: RandomPort, clock: ClockPort) -> None:
        self._random = random
        self._clock = clock

    @property
    def random(self) -> RandomPort:
        """The random source drawn from by :meth:`build_from_sources`."""
        return self._random

    @property
    def clock(self) -> ClockPort:
        """The clock read by :meth:`build_from_sources`."""
        return self._clock

    def build_from_input(self, value: int) -> Result:
        """Derive a result from *value* alone.

        The date-time is always :data:`FIXED_DATE_TIME`, independent
        of *value*.

        Raises:
            InvalidInputError: If *value* is negative.
        """
        if value < 0:
            raise InvalidInputError(f"Input must be non-negative, got {value}")
        result = Result(
            one_integer=value,
            one_double=DOUBLE_FACTOR * value,
            one_string=REPEATED_CHAR * value,
            one_date_time=FIXED_DATE_TIME,
        )
        logger.debug(
            "Built result from input %d",
            value,
            extra={
                "operation": "build_from_input",
                "input": value,
                "result": result.to_dict(),
            },
        )
        return result

    def build_from_sources(self) -> Result:
        """Draw a result from the random source and the clock."""
        one_integer = self._random.next_int()
        one_double = self._random.next_double()
        length = self._random.next_int_below(MAX_RANDOM_LENGTH)
        one_date_time = self._clock.now().replace(tzinfo=None)
        result = Result(
            one_integer=one_integer,
            one_double=one_double,
            one_string=REPEATED_CHAR * length,
            one_date_time=one_date_time,
        )
        logger.debug(
            "Built result from sources",
            extra={"operation": "build_from_sources", "result": result.to_dict()},
        )
        return result
