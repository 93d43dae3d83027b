"""Command line interface for snapdemo (Typer-based).

Provides :func:`build_cli`, which constructs the ``snapdemo`` Typer
app::

    snapdemo input 3
    snapdemo sources --seed 1234 --fixed-time 2022-10-01T10:30:00Z
    snapdemo demo

Global options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``) are parsed by the callback, which loads
:class:`~snapdemo._settings.Settings` and configures logging before
any command runs.  Results go to stdout; logs and error payloads go
to stderr.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Annotated, Literal, get_args

import typer
from pydantic import ValidationError

from snapdemo._errors import SnapdemoError, build_error_payload
from snapdemo._logging import configure_logging
from snapdemo._result import Result
from snapdemo._settings import LoggingSettings, Settings, SourceSettings, build_builder

logger = logging.getLogger(__name__)

SERVICE_NAME = "snapdemo"

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)

OutputFormat = Literal["json", "text"]
_VALID_OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)


def _package_version() -> str:
    from snapdemo import __version__

    return __version__


def _check_output(output: str) -> None:
    if output not in _VALID_OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Invalid output format '{output}'. "
            f"Choose from: {', '.join(_VALID_OUTPUT_FORMATS)}",
            param_hint="'--output'",
        )


def _render(results: list[Result], output: str) -> str:
    if output == "text":
        return "\n".join(result.to_text() for result in results)
    if len(results) == 1:
        return results[0].to_json().rstrip("\n")
    return json.dumps([result.to_dict() for result in results], indent=2)


def _fail(error: SnapdemoError, **context: object) -> typer.Exit:
    """Report *error* on stderr and return the exit to raise.

    *context* is attached to the warning record, e.g. ``operation``.
    """
    payload = build_error_payload(error)
    logger.warning(
        "%s (type=%s)", payload.message, payload.error_type, extra=context
    )
    typer.echo(payload.to_json(), err=True)
    return typer.Exit(code=EXIT_INPUT_ERROR)


def _parse_instant(raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Invalid ISO 8601 date-time '{raw}'.",
            param_hint="'--fixed-time'",
        ) from exc


def build_cli() -> typer.Typer:
    """Construct the ``snapdemo`` Typer application."""
    cli = typer.Typer(
        help="Build demo results from an input or from random and clock sources.",
    )

    # -- global options ------------------------------------------------------

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        if version_flag:
            typer.echo(f"{SERVICE_NAME} v{_package_version()}")
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        try:
            settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            typer.echo(f"Configuration error: {exc}", err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )
        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(
            settings.logging,
            service=SERVICE_NAME,
            version=_package_version(),
        )
        ctx.obj = settings

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())

    # -- commands ------------------------------------------------------------

    # "-3" would otherwise be parsed as an unknown short option
    @cli.command("input", context_settings={"ignore_unknown_options": True})
    def input_command(
        ctx: typer.Context,
        value: Annotated[int, typer.Argument(help="Non-negative repeat count.")],
        output: Annotated[
            str,
            typer.Option("--output", "-o", help="Output format: json or text."),
        ] = "json",
    ) -> None:
        """Build a result from an explicit input value."""
        _check_output(output)
        settings: Settings = ctx.obj
        builder = build_builder(settings)
        try:
            result = builder.build_from_input(value)
        except SnapdemoError as exc:
            raise _fail(exc, operation="build_from_input", input=value) from exc
        typer.echo(_render([result], output))

    @cli.command("sources")
    def sources_command(
        ctx: typer.Context,
        seed: Annotated[
            int | None,
            typer.Option("--seed", help="Seed for reproducible draws."),
        ] = None,
        timezone: Annotated[
            str | None,
            typer.Option("--timezone", help="IANA time zone for the clock."),
        ] = None,
        fixed_time: Annotated[
            str | None,
            typer.Option("--fixed-time", help="Fixed ISO 8601 instant for the clock."),
        ] = None,
        count: Annotated[
            int,
            typer.Option("--count", "-n", min=1, help="Number of results to draw."),
        ] = 1,
        output: Annotated[
            str,
            typer.Option("--output", "-o", help="Output format: json or text."),
        ] = "json",
    ) -> None:
        """Build results from the random and clock sources."""
        _check_output(output)
        settings: Settings = ctx.obj

        overrides: dict[str, object] = {}
        if seed is not None:
            overrides["seed"] = seed
        if timezone is not None:
            overrides["timezone"] = timezone
        if fixed_time is not None:
            overrides["fixed_time"] = _parse_instant(fixed_time)
        try:
            source = SourceSettings.model_validate(
                settings.source.model_dump() | overrides,
            )
        except ValidationError as exc:
            typer.echo(f"Configuration error: {exc}", err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc
        settings = settings.model_copy(update={"source": source})
        logger.debug(
            "Drawing %d result(s)",
            count,
            extra={"operation": "build_from_sources", "seed": source.seed},
        )

        builder = build_builder(settings)
        results = [builder.build_from_sources() for _ in range(count)]
        typer.echo(_render(results, output))

    @cli.command("demo")
    def demo_command(ctx: typer.Context) -> None:
        """Print one result of each kind."""
        settings: Settings = ctx.obj
        builder = build_builder(settings)
        typer.echo(f"build_from_input(3) = {builder.build_from_input(3).to_text()}")
        typer.echo(f"build_from_sources() = {builder.build_from_sources().to_text()}")

    return cli


def main() -> None:
    """Console script entry point."""
    build_cli()()
