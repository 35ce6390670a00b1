"""Document storage for one source file and one destination file.

The source is read completely before anything touches the destination.
Filesystem failures surface as `PipelineStageError` carrying the path.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import PipelineStageError


class DocumentStore:
    """Filesystem-backed reader/writer for single documents."""

    def read_bytes(self, path: Path) -> bytes:
        """Read all bytes from `path`.

        Raises:
            PipelineStageError: With stage `open` or `read` on `OSError`.
        """

        try:
            handle = path.open("rb")
        except OSError as exc:
            raise PipelineStageError(
                stage="open",
                detail=f"Error opening file: {exc}",
                path=path,
                hint="Check that the input file exists and is readable.",
            ) from exc

        with handle:
            try:
                return handle.read()
            except OSError as exc:
                raise PipelineStageError(
                    stage="read", detail=f"Error reading file: {exc}", path=path
                ) from exc

    def write_bytes(self, path: Path, data: bytes) -> Path:
        """Create or truncate `path` and write `data` to it.

        Raises:
            PipelineStageError: With stage `create` or `write` on `OSError`.
        """

        try:
            handle = path.open("wb")
        except OSError as exc:
            raise PipelineStageError(
                stage="create",
                detail=f"Error creating file: {exc}",
                path=path,
                hint="Check that the output directory exists and is writable.",
            ) from exc

        with handle:
            try:
                handle.write(data)
                handle.flush()
            except OSError as exc:
                raise PipelineStageError(
                    stage="write",
                    detail=f"Error writing to destination file: {exc}",
                    path=path,
                ) from exc
        return path
