from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import click
import click.utils as click_utils
import typer
from typer.main import get_command

from lcovsum._meta import __version__, logger
from lcovsum.api import summarize
from lcovsum.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_IOERR,
    EXIT_NOINPUT,
    EXIT_OK,
    EXIT_THRESHOLD,
)
from lcovsum.core.config import LOG_FORMAT, Format, load_settings
from lcovsum.core.thresholds import Threshold, evaluate_thresholds
from lcovsum.errors import ConfigError, LcovError
from lcovsum.io import STDIN, open_input, write_output
from lcovsum.render import render

if TYPE_CHECKING:
    from lcovsum.core.config import Settings
    from lcovsum.core.model import Summary


def _configure_logging(*, quiet: bool, verbose: bool) -> None:
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if verbose:
        logger.debug("verbose logging enabled")


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"lcovsum {__version__}")
        raise typer.Exit


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    return typer.Exit(code=code)


def _read_summary(source: str, *, strict: bool) -> Summary:
    with ExitStack() as stack:
        try:
            stream = stack.enter_context(open_input(source))
        except OSError as exc:
            raise _fail(f"cannot open {source}: {exc.strerror or exc}", EXIT_NOINPUT) from exc
        logger.info("reading LCOV data from %s", "<stdin>" if source == STDIN else source)
        try:
            return summarize(stream, strict=strict)
        except LcovError as exc:
            raise _fail(f"failed to parse LCOV data: {exc}", EXIT_DATAERR) from exc
        except OSError as exc:
            raise _fail(f"failed to read {source}: {exc}", EXIT_IOERR) from exc


def _enforce_thresholds(summary: Summary, settings: Settings) -> None:
    threshold = Threshold(
        lines=settings.fail_under_lines,
        functions=settings.fail_under_functions,
        branches=settings.fail_under_branches,
    )
    if threshold.is_empty():
        return
    result = evaluate_thresholds(summary, [threshold])
    if result.passed:
        return
    for failure in result.failures:
        typer.echo(
            (
                "Threshold failed: "
                f"{failure.metric} {failure.comparison} {failure.required}"
                f" (actual {failure.actual})"
            ),
            err=True,
        )
    raise typer.Exit(code=EXIT_THRESHOLD)


def summary_cmd(
    lcov_file: Annotated[
        str,
        typer.Argument(metavar="LCOV_FILE", help="LCOV tracefile to summarize, or '-' to read standard input."),
    ],
    fmt: Annotated[
        Format | None,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail when input ends inside an unterminated file block."),
    ] = False,
    fail_under_lines: Annotated[
        float | None,
        typer.Option("--fail-under-lines", help="Fail if line coverage % is below this value."),
    ] = None,
    fail_under_functions: Annotated[
        float | None,
        typer.Option("--fail-under-functions", help="Fail if function coverage % is below this value."),
    ] = None,
    fail_under_branches: Annotated[
        float | None,
        typer.Option("--fail-under-branches", help="Fail if branch coverage % is below this value."),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Suppress non-essential output (errors only)."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Verbose logging."),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Summarize line, function and branch coverage of an LCOV tracefile."""
    if quiet and verbose:
        msg = "--quiet"
        raise click.BadOptionUsage(msg, "--quiet and --verbose cannot be combined")
    _configure_logging(quiet=quiet, verbose=verbose)

    try:
        settings = load_settings()
    except ConfigError as exc:
        raise _fail(str(exc), EXIT_CONFIG) from exc
    settings = settings.merged(
        format=fmt,
        strict=strict or None,
        fail_under_lines=fail_under_lines,
        fail_under_functions=fail_under_functions,
        fail_under_branches=fail_under_branches,
    )
    logger.debug("effective settings: %s", settings)

    summary = _read_summary(lcov_file, strict=settings.strict)

    to_stdout = output is None or output == Path(STDIN)
    use_color = to_stdout and not click_utils.should_strip_ansi(sys.stdout)
    write_output(render(summary, settings.format, color=use_color), output)

    _enforce_thresholds(summary, settings)
    raise typer.Exit(code=EXIT_OK)


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Summarize LCOV coverage reports.",
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )
    app.command()(summary_cmd)
    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
