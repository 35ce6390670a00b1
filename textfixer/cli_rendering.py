"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for usage text, run
summaries, and command diagnostics.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .pipeline import RunResult

USAGE = "Usage: textfixer <input filename> <output filename>"


def echo_usage() -> None:
    """Print the positional-argument usage line."""

    typer.echo(USAGE)


def exit_with_command_error(exc: Exception) -> NoReturn:
    """Print the failure to stdout and stop without writing further output.

    Failures end the run with exit code 0, matching the usage path.
    """

    if isinstance(exc, PipelineStageError):
        for line in exc.lines():
            typer.echo(line)
    else:
        typer.echo(f"Error: {exc}")
    raise typer.Exit(code=0) from exc


def echo_run_summary(result: RunResult) -> None:
    """Print output location and command/article counters."""

    report = result.report
    typer.echo(f"Wrote {result.output_path}")
    typer.echo(
        f"Commands applied: {report.applied_commands}, dropped: {report.dropped_commands}"
    )
    typer.echo(f"Articles fixed: {report.article_rewrites}")
    if report.diagnostics:
        typer.echo(f"Conversion errors: {len(report.diagnostics)}")
