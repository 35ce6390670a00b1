"""Run logging for one document.

Every line is `LEVEL: [stage] message`. Stage lines carry the stage position
and the counters the stage produced; command diagnostics carry the command,
the offending word and its position in the word sequence.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _format_counters(counters: dict[str, object]) -> str:
    return "".join(f" {name}={value}" for name, value in counters.items())


class RunLogger:
    """Send stage progress and command diagnostics to a loguru sink."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format="{level}: [{extra[stage]}] {message}",
            level=level,
            colorize=False,
            filter=lambda record: "stage" in record["extra"],
        )

    def _emit(self, level: str, stage: str, message: str) -> None:
        _loguru_logger.bind(stage=stage).log(level, message)

    def stage_started(self, stage: str, position: int, total: int) -> None:
        self._emit("DEBUG", stage, f"start {position}/{total}")

    def stage_finished(self, stage: str, **counters: object) -> None:
        """Log a finished stage with the counters it reported, in call order."""

        self._emit("INFO", stage, f"done{_format_counters(counters)}")

    def stage_failed(self, stage: str, error: Exception) -> None:
        """Log the error type and, for I/O failures, the path involved."""

        message = f"failed {type(error).__name__}"
        path = getattr(error, "path", None)
        if path is not None:
            message += f" path={path}"
        self._emit("ERROR", stage, message)

    def conversion_failed(self, command: str, word: str, position: int, message: str) -> None:
        """Log a base conversion that left `word` unchanged at `position`."""

        self._emit("WARNING", "commands", f"{command} word={word!r} position={position}: {message}")
