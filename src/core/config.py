"""Runtime configuration model for recordkeeper.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DATA_FILE_ENV_VAR,
    DEFAULT_DATA_FILE,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RecordKeeperConfigError


@dataclass(frozen=True)
class RecordKeeperConfig:
    """Validated runtime configuration.

    Attributes:
        data_file: JSON file holding the record container.
        log_level: Minimum structured log level written to stderr.
    """

    data_file: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "RecordKeeperConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RecordKeeperConfigError: If environment values are invalid.
        """
        data_file_value = os.getenv(DATA_FILE_ENV_VAR, str(DEFAULT_DATA_FILE))
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            data_file=_parse_data_file(data_file_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_data_file(raw_value: str) -> Path:
    """Parse the data file environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Absolute data file path.

    Raises:
        RecordKeeperConfigError: If value is blank.
    """
    if not raw_value.strip():
        raise RecordKeeperConfigError(
            f"Invalid {DATA_FILE_ENV_VAR} value: expected a file path, got an empty string. "
            f"Unset {DATA_FILE_ENV_VAR} to use the default '{DEFAULT_DATA_FILE}'."
        )
    return Path(raw_value).expanduser().resolve()


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        RecordKeeperConfigError: If value is not a supported level.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise RecordKeeperConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return level
