"""Public SDK surface for recordkeeper.

This module provides a stable import path for library users.
It re-exports the record store, typed models and errors.
"""

from __future__ import annotations

from core.config import RecordKeeperConfig
from core.errors import (
    RecordKeeperConfigError,
    RecordKeeperError,
    RecordStoreError,
    RecordValidationError,
    StorageReadError,
    StorageWriteError,
)
from core.types import Record, RecordDraft
from store.record_store import RecordStore

__all__ = [
    "Record",
    "RecordDraft",
    "RecordKeeperConfig",
    "RecordKeeperConfigError",
    "RecordKeeperError",
    "RecordStore",
    "RecordStoreError",
    "RecordValidationError",
    "StorageReadError",
    "StorageWriteError",
]
