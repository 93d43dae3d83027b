"""Application configuration via pydantic-settings.

Configuration is loaded from ``SNAPDEMO_``-prefixed environment
variables and/or a ``.env`` file.  Nested models use ``__`` as the
delimiter in env var names, e.g. ``SNAPDEMO_SOURCE__SEED=1234``.

Two concerns are configurable:

* **Source** — seed, time zone and optional fixed instant for the
  random and clock sources behind ``build_from_sources``.
* **Logging** — level, format, optional file sink, rotation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snapdemo._builder import ResultBuilder
from snapdemo._clock import ClockPort, FixedClock, SystemClock, resolve_zone
from snapdemo._random import SeededRandom

# -------------------------------------------------------------------
# Sub-models, nested into Settings by composition
# -------------------------------------------------------------------


class SourceSettings(BaseModel):
    """Random and clock source configuration.

    Environment variables (with ``__`` nesting)::

        SNAPDEMO_SOURCE__SEED=1234
        SNAPDEMO_SOURCE__TIMEZONE=Europe/Madrid
        SNAPDEMO_SOURCE__FIXED_TIME=2022-10-01T10:30:00Z
    """

    seed: int | None = Field(
        default=None,
        description="Random seed. ``None`` draws live randomness.",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA time zone the clock reports in.",
    )
    fixed_time: datetime | None = Field(
        default=None,
        description=(
            "When set, the clock always reports this instant "
            "instead of the system time. Naive values are UTC."
        ),
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        resolve_zone(value)
        return value


class LoggingSettings(BaseModel):
    """Logging configuration.

    ``format`` selects ``"text"`` (default, human-readable) or
    ``"json"`` (one JSON object per line).  When ``file`` is set,
    logs are also written to a size-rotated file.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format.",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description="Maximum log file size in megabytes before rotation.",
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for snapdemo.

    Example ``.env``::

        SNAPDEMO_SOURCE__SEED=1234
        SNAPDEMO_SOURCE__FIXED_TIME=2022-10-01T10:30:00Z
        SNAPDEMO_LOGGING__LEVEL=DEBUG
        SNAPDEMO_LOGGING__FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="SNAPDEMO_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    source: SourceSettings = Field(
        default_factory=SourceSettings,
        description="Random and clock source settings.",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )


def build_clock(settings: SourceSettings) -> ClockPort:
    """Create the clock described by *settings*."""
    if settings.fixed_time is not None:
        return FixedClock(settings.fixed_time, zone=settings.timezone)
    return SystemClock(settings.timezone)


def build_builder(settings: Settings) -> ResultBuilder:
    """Wire a :class:`ResultBuilder` from *settings*."""
    return ResultBuilder(
        random=SeededRandom(settings.source.seed),
        clock=build_clock(settings.source),
    )
