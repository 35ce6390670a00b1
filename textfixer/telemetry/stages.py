"""Stage tracking for a document run.

Stage order:
read -> split -> commands -> articles -> join -> punctuation -> quotes -> write
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeVar

from .logger import RunLogger

_T = TypeVar("_T")

STAGES = ("read", "split", "commands", "articles", "join", "punctuation", "quotes", "write")

ProgressCallback = Callable[[str, int, int], None]


class StageTracker:
    """Run named stages and report them to a progress callback and a run logger.

    Both collaborators are optional; without them `run` only calls the action.
    """

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self._run_logger = run_logger
        self._progress_callback = progress_callback

    def run(
        self,
        stage: str,
        action: Callable[[], _T],
        counters: Callable[[_T], Mapping[str, object]] | None = None,
    ) -> _T:
        """Run `action` as `stage` and return its result.

        `counters` turns the result into the values logged when the stage
        finishes. Exceptions are logged and re-raised unchanged.
        """

        position = STAGES.index(stage) + 1
        if self._progress_callback is not None:
            self._progress_callback(stage, position, len(STAGES))
        if self._run_logger is not None:
            self._run_logger.stage_started(stage, position, len(STAGES))

        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.stage_failed(stage, exc)
            raise

        if self._run_logger is not None:
            self._run_logger.stage_finished(stage, **(counters(result) if counters else {}))
        return result
