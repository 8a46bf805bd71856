"""Shared JSON serialization for Record payloads.

This module centralizes Record JSON serialization logic.
It is reused by the record store and CLI rendering.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.constants import (
    RECORD_CORE_FIELDS,
    RECORD_DESCRIPTION_FIELD,
    RECORD_ID_FIELD,
    RECORD_NAME_FIELD,
)
from core.errors import StorageReadError
from core.types import Record


def record_to_payload(record: Record) -> dict[str, object]:
    """Serialize Record into JSON-safe payload.

    Args:
        record: Record instance.

    Returns:
        Dictionary payload for JSON encoding, extra fields last.
    """
    payload: dict[str, object] = {
        RECORD_ID_FIELD: record.id,
        RECORD_NAME_FIELD: record.name,
        RECORD_DESCRIPTION_FIELD: record.description,
    }
    for key, value in record.extra_fields.items():
        if key not in RECORD_CORE_FIELDS:
            payload[key] = value
    return payload


def record_from_payload(payload: Mapping[str, Any]) -> Record:
    """Deserialize JSON payload into Record.

    Args:
        payload: Serialized record payload.

    Returns:
        Parsed Record.

    Raises:
        StorageReadError: If id, name or description is missing.
    """
    record_id = payload.get(RECORD_ID_FIELD)
    if not isinstance(record_id, str) or not record_id:
        raise StorageReadError(
            f"Invalid record payload: expected non-empty string '{RECORD_ID_FIELD}', "
            f"got {record_id!r}."
        )
    missing = [
        key for key in (RECORD_NAME_FIELD, RECORD_DESCRIPTION_FIELD) if key not in payload
    ]
    if missing:
        raise StorageReadError(
            f"Invalid record payload for id '{record_id}': missing {', '.join(missing)}."
        )
    return Record(
        id=record_id,
        name=payload[RECORD_NAME_FIELD],
        description=payload[RECORD_DESCRIPTION_FIELD],
        extra_fields={
            str(key): value for key, value in payload.items() if key not in RECORD_CORE_FIELDS
        },
    )
