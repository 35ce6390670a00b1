"""Shared pytest fixtures for the full textfixer test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from textfixer.config import SETTINGS


@pytest.fixture(autouse=True)
def _isolate_textfixer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `TEXTFIXER_*` variables from leaking into config resolution."""

    for key in SETTINGS.values():
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes UTF-8 text into `tmp_path` and returns its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
