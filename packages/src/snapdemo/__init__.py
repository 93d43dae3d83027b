"""snapdemo.

A small result builder used to demonstrate snapshot testing of
deterministic and source-driven values.
"""

from importlib.metadata import PackageNotFoundError, version

from snapdemo._builder import FIXED_DATE_TIME, ResultBuilder
from snapdemo._clock import ClockPort, FixedClock, SystemClock
from snapdemo._errors import (
    ErrorPayload,
    InvalidInputError,
    ResultFormatError,
    SnapdemoError,
    build_error_payload,
)
from snapdemo._logging import JsonFormatter, TextFormatter, configure_logging
from snapdemo._random import RandomPort, SeededRandom
from snapdemo._result import Result
from snapdemo._settings import (
    LoggingSettings,
    Settings,
    SourceSettings,
    build_builder,
)

try:
    __version__ = version("snapdemo")
except PackageNotFoundError:
    # Running from a source tree without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Core
    "FIXED_DATE_TIME",
    "Result",
    "ResultBuilder",
    # Clock
    "ClockPort",
    "FixedClock",
    "SystemClock",
    # Random
    "RandomPort",
    "SeededRandom",
    # Errors
    "ErrorPayload",
    "InvalidInputError",
    "ResultFormatError",
    "SnapdemoError",
    "build_error_payload",
    # Logging
    "JsonFormatter",
    "TextFormatter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
    "SourceSettings",
    "build_builder",
]
