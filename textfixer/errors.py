"""Errors that stop a document run before the output is complete."""

from __future__ import annotations

from pathlib import Path


class PipelineStageError(RuntimeError):
    """A document run stopped at `stage`.

    Attributes:
        stage: One of `config`, `open`, `read`, `create` or `write`.
        detail: Message printed to the user as-is.
        path: Document or config file involved, when there is one.
        hint: Optional follow-up line printed after `detail`.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        path: Path | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.path = path
        self.hint = hint

    @property
    def output_touched(self) -> bool:
        """Whether the destination may already have been created or truncated."""

        return self.stage == "write"

    def lines(self) -> list[str]:
        """Return the user-facing lines for this failure."""

        rendered = [self.detail]
        if self.output_touched and self.path is not None:
            rendered.append(f"Destination `{self.path}` may be incomplete.")
        if self.hint:
            rendered.append(f"Hint: {self.hint}")
        return rendered
