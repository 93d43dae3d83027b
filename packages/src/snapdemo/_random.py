"""Random number port and seeded adapter.

Provides :class:`RandomPort` (Protocol) and :class:`SeededRandom`,
which wraps the standard library's Mersenne Twister.

Given the same seed, :class:`SeededRandom` replays the same draws in
the same order; each draw advances the generator, so results depend on
call order.  Instances are not safe for concurrent use.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

_INT_BITS = 32
_INT_OFFSET = 1 << (_INT_BITS - 1)


@runtime_checkable
class RandomPort(Protocol):
    """Source of pseudo-random draws consumed by the result builder.

    The production implementation is :class:`SeededRandom`.  Tests
    inject ``snapdemo.testing.ScriptedRandom`` to script exact values.
    """

    def next_int(self) -> int:
        """Return a signed 32-bit integer, ``-2**31 <= n < 2**31``."""
        ...

    def next_double(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        ...

    def next_int_below(self, until: int) -> int:
        """Return an integer in ``[0, until)``.

        Raises:
            ValueError: If *until* is not positive.
        """
        ...


class SeededRandom:
    """Production random source wrapping :class:`random.Random`.

    Satisfies :class:`RandomPort` via structural subtyping.

    Args:
        seed: Explicit seed for reproducible draws.  ``None`` seeds
            from the operating system.

    Usage::

        rng = SeededRandom(1234)
        first = rng.next_int()
        assert SeededRandom(1234).next_int() == first
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int | None:
        """The seed this source was created with, if any."""
        return self._seed

    def next_int(self) -> int:
        """Return a signed 32-bit integer."""
        return self._random.getrandbits(_INT_BITS) - _INT_OFFSET

    def next_double(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        return self._random.random()

    def next_int_below(self, until: int) -> int:
        """Return an integer in ``[0, until)``."""
        if until <= 0:
            raise ValueError(f"until must be positive, got {until}")
        return self._random.randrange(until)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed!r})"
