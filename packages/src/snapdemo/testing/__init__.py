"""Public test-support utilities for snapdemo.

Provided symbols:

- :class:`ScriptedRandom` — random source replaying queued values.
- :class:`FixedClock` — clock reporting a constant instant.
- :data:`SEED` / :data:`FIXED_INSTANT` — the deterministic test inputs.
- :func:`make_builder` — builder wired with the deterministic inputs.
- :func:`make_settings` — ``Settings`` with an explicit source section.
"""

from snapdemo._clock import FixedClock
from snapdemo.testing._random import ScriptedRandom
from snapdemo.testing._settings import (
    FIXED_INSTANT,
    SEED,
    make_builder,
    make_settings,
)

__all__ = [
    "FIXED_INSTANT",
    "FixedClock",
    "SEED",
    "ScriptedRandom",
    "make_builder",
    "make_settings",
]
