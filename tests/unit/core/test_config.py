"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RecordKeeperConfig
from core.errors import RecordKeeperConfigError


def test_from_env_defaults_to_data_json(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to data.json with warning-level logs."""
    monkeypatch.delenv("RECORDKEEPER_DATA_FILE", raising=False)
    monkeypatch.delenv("RECORDKEEPER_LOG_LEVEL", raising=False)

    config = RecordKeeperConfig.from_env()

    assert config.data_file.name == "data.json" and config.log_level == "WARNING"


def test_from_env_reads_data_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the data file from environment."""
    monkeypatch.setenv("RECORDKEEPER_DATA_FILE", "./.tmp-records/items.json")

    config = RecordKeeperConfig.from_env()

    assert config.data_file.is_absolute() and config.data_file.name == "items.json"


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level names should be accepted case-insensitively."""
    monkeypatch.setenv("RECORDKEEPER_LOG_LEVEL", "debug")

    config = RecordKeeperConfig.from_env()

    assert config.log_level == "DEBUG"


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log levels."""
    monkeypatch.setenv("RECORDKEEPER_LOG_LEVEL", "chatty")

    with pytest.raises(RecordKeeperConfigError):
        RecordKeeperConfig.from_env()

    assert True


def test_from_env_raises_for_blank_data_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a blank data file value."""
    monkeypatch.setenv("RECORDKEEPER_DATA_FILE", "  ")

    with pytest.raises(RecordKeeperConfigError):
        RecordKeeperConfig.from_env()

    assert True
