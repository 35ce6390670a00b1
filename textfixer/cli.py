"""Command-line interface for textfixer.

Responsibilities:
- Accept an input path and an output path as positional arguments.
- Resolve `FixerConfig` from `--config` or the environment.
- Render usage, diagnostics and the run summary.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_run_summary, echo_usage, exit_with_command_error
from .config import ConfigLoader, FixerConfig
from .errors import PipelineStageError
from .pipeline import TextFixerPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="textfixer",
    add_completion=False,
    help="Apply inline formatting commands and fix spacing in a text file.",
)


def _load_config(config_path: Path | None) -> FixerConfig:
    """Load YAML or environment config and map failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `TEXTFIXER_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            path=config_path,
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            path=config_path,
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            path=config_path,
            hint="Verify file permissions.",
        ) from exc


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def fix_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Path to the source text file.", show_default=False),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Argument(help="Path of the file to create or overwrite.", show_default=False),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="YAML config with pass toggles and encoding."),
    ] = None,
) -> None:
    """Fix one text file and write the result to a new file."""

    if input_path is None or output_path is None:
        echo_usage()
        return

    try:
        config = _load_config(config_file)
        pipeline = TextFixerPipeline(config=config, run_logger=RunLogger())
        result = pipeline.run(input_path, output_path)
    except Exception as exc:
        exit_with_command_error(exc)

    echo_run_summary(result)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
