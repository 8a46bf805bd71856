"""recordkeeper exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RecordKeeperError(Exception):
    """Base exception for all recordkeeper failures."""


class RecordKeeperConfigError(RecordKeeperError):
    """Raised for invalid runtime configuration."""


class RecordValidationError(RecordKeeperError):
    """Raised when user-supplied record fields are empty."""


class RecordStoreError(RecordKeeperError):
    """Raised for backing file persistence failures."""


class StorageReadError(RecordStoreError):
    """Raised when the backing file is missing, unreadable or malformed."""


class StorageWriteError(RecordStoreError):
    """Raised when the backing file cannot be replaced."""
