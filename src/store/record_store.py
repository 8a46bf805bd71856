"""File-backed record store.

This module owns create, list, find, update and delete semantics over
the ordered record container. Every call reads the whole file and every
mutation writes the whole file back; nothing is cached between calls.
"""

from __future__ import annotations

from pathlib import Path
import time
from typing import Mapping, Sequence
from uuid import uuid4

from core.constants import RECORD_ID_FIELD, RECORD_ID_SUFFIX_LENGTH
from core.logging_config import get_logger
from core.types import Record, RecordDraft
from store.container_io import read_container, write_container
from store.record_payload import record_from_payload, record_to_payload

_LOGGER = get_logger(__name__)


class RecordStore:
    """Record CRUD over one JSON container file."""

    def __init__(self, data_file: Path) -> None:
        self._data_file = data_file.expanduser().resolve()

    @property
    def data_file(self) -> Path:
        """Absolute path of the backing file."""
        return self._data_file

    def initialize(self) -> None:
        """Create an empty container when no backing file exists.

        Safe to call on every process start; an existing file is never
        touched, even when it is malformed.

        Raises:
            StorageWriteError: If the empty container cannot be written.
        """
        if self._data_file.exists():
            return
        write_container(self._data_file, [])
        _LOGGER.info("record_store_initialized", data_file=str(self._data_file))

    def list_all(self) -> tuple[Record, ...]:
        """Return every record in stored order.

        Raises:
            StorageReadError: If the backing file is missing or malformed.
        """
        return tuple(record_from_payload(item) for item in read_container(self._data_file))

    def save_all(self, records: Sequence[Record]) -> None:
        """Overwrite the container with the given records.

        Raises:
            StorageWriteError: If the backing file cannot be replaced.
        """
        write_container(self._data_file, [record_to_payload(record) for record in records])

    def add(self, draft: RecordDraft) -> Record:
        """Append a new record with a freshly assigned id.

        Args:
            draft: Already-validated name and description.

        Returns:
            The created record.
        """
        records = list(self.list_all())
        record = Record(
            id=_build_record_id({existing.id for existing in records}),
            name=draft.name,
            description=draft.description,
        )
        records.append(record)
        self.save_all(records)
        _LOGGER.info("record_added", record_id=record.id, record_count=len(records))
        return record

    def find_by_id(self, record_id: str) -> Record | None:
        """Return the first record with a matching id, or None."""
        for record in self.list_all():
            if record.id == record_id:
                return record
        _LOGGER.debug("record_lookup_missed", record_id=record_id)
        return None

    def update_by_id(self, record_id: str, patch: Mapping[str, object]) -> Record | None:
        """Shallow-merge a patch over one record, keeping its id.

        Args:
            record_id: Id of the record to update.
            patch: Fields to overwrite or add. An ``id`` key is ignored.

        Returns:
            The updated record, or None when no record matched. A miss
            performs no write.
        """
        records = list(self.list_all())
        for index, existing in enumerate(records):
            if existing.id != record_id:
                continue
            merged = {**record_to_payload(existing), **patch, RECORD_ID_FIELD: existing.id}
            records[index] = record_from_payload(merged)
            self.save_all(records)
            _LOGGER.info(
                "record_updated",
                record_id=record_id,
                fields=sorted(key for key in patch if key != RECORD_ID_FIELD),
            )
            return records[index]
        _LOGGER.debug("record_lookup_missed", record_id=record_id)
        return None

    def delete_by_id(self, record_id: str) -> bool:
        """Remove every record with a matching id.

        Returns:
            True when at least one record was removed. The file is only
            rewritten in that case.
        """
        records = self.list_all()
        remaining = [record for record in records if record.id != record_id]
        if len(remaining) == len(records):
            _LOGGER.debug("record_lookup_missed", record_id=record_id)
            return False
        self.save_all(remaining)
        _LOGGER.info("record_deleted", record_id=record_id, record_count=len(remaining))
        return True


def _build_record_id(existing_ids: set[str]) -> str:
    # Millisecond prefix keeps ids readable; the random suffix separates
    # records created within the same millisecond.
    while True:
        candidate = f"{time.time_ns() // 1_000_000}{uuid4().hex[:RECORD_ID_SUFFIX_LENGTH]}"
        if candidate not in existing_ids:
            return candidate
