"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Put src on sys.path so core, store and cli import without install."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_recordkeeper_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer RECORDKEEPER_* settings out of test runs."""
    monkeypatch.delenv("RECORDKEEPER_DATA_FILE", raising=False)
    monkeypatch.delenv("RECORDKEEPER_LOG_LEVEL", raising=False)
