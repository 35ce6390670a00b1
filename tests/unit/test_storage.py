"""Unit tests for document storage and its stage-scoped I/O errors."""

from __future__ import annotations

from pathlib import Path

import pytest

from textfixer.errors import PipelineStageError
from textfixer.io.storage import DocumentStore


def test_document_store_reads_and_truncates_on_write(tmp_path: Path) -> None:
    """Writes should replace previous content completely."""

    store = DocumentStore()
    path = tmp_path / "doc.txt"
    path.write_bytes(b"previous longer content")

    written = store.write_bytes(path, b"new")

    assert written == path
    assert store.read_bytes(path) == b"new"


def test_document_store_reports_open_failure(tmp_path: Path) -> None:
    """Missing sources should raise an `open` stage error chained from `OSError`."""

    with pytest.raises(PipelineStageError) as exc_info:
        DocumentStore().read_bytes(tmp_path / "missing.txt")

    assert exc_info.value.stage == "open"
    assert exc_info.value.detail.startswith("Error opening file: ")
    assert exc_info.value.path == tmp_path / "missing.txt"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_document_store_reports_read_failure_for_directories(tmp_path: Path) -> None:
    """Reading a directory should fail in the `open` or `read` stage, never escape."""

    with pytest.raises(PipelineStageError) as exc_info:
        DocumentStore().read_bytes(tmp_path)

    assert exc_info.value.stage in {"open", "read"}


def test_document_store_reports_create_failure(tmp_path: Path) -> None:
    """Destinations in missing directories should raise a `create` stage error."""

    with pytest.raises(PipelineStageError) as exc_info:
        DocumentStore().write_bytes(tmp_path / "missing" / "out.txt", b"data")

    assert exc_info.value.stage == "create"
    assert exc_info.value.detail.startswith("Error creating file: ")
    assert exc_info.value.path == tmp_path / "missing" / "out.txt"
    assert exc_info.value.lines()[-1].startswith("Hint: ")
