"""Container JSON persistence helpers.

This module isolates backing file IO and container shape checks.
It keeps the record store focused on record semantics.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from typing import Any, Sequence

from core.constants import CONTAINER_ITEMS_KEY
from core.errors import StorageReadError, StorageWriteError


def read_container(data_file: Path) -> list[dict[str, Any]]:
    """Read and validate the record container.

    Args:
        data_file: Backing JSON file path.

    Returns:
        Item payloads in stored order.

    Raises:
        StorageReadError: If the file is missing, unreadable or malformed.
    """
    try:
        payload = json.loads(data_file.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise StorageReadError(
            f"Record file not found at {data_file}. Initialize the store before reading."
        ) from error
    except json.JSONDecodeError as error:
        raise StorageReadError(
            f"Failed to parse record file at {data_file}: {error.msg}."
        ) from error
    except (OSError, UnicodeDecodeError) as error:
        raise StorageReadError(f"Failed to read record file {data_file}: {error}.") from error
    if not isinstance(payload, dict):
        raise StorageReadError(
            f"Failed to parse record file at {data_file}: expected JSON object at top level."
        )
    items = payload.get(CONTAINER_ITEMS_KEY)
    if not isinstance(items, list):
        raise StorageReadError(
            f"Failed to parse record file at {data_file}: "
            f"expected '{CONTAINER_ITEMS_KEY}' to be a list."
        )
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise StorageReadError(
                f"Failed to parse record file at {data_file}: item {index} is not an object."
            )
    return items


def write_container(data_file: Path, items: Sequence[dict[str, object]]) -> None:
    """Replace the record container with the given items.

    The payload is written to a sibling temporary file and moved over the
    target, so readers see either the old or the new container.

    Args:
        data_file: Backing JSON file path.
        items: Item payloads in order.

    Raises:
        StorageWriteError: If the file cannot be written or replaced.
    """
    body = json.dumps({CONTAINER_ITEMS_KEY: list(items)}, indent=2, ensure_ascii=False) + "\n"
    temp_path: Path | None = None
    try:
        data_file.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=data_file.parent,
            prefix=f".{data_file.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(body)
        os.replace(temp_path, data_file)
    except OSError as error:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise StorageWriteError(f"Failed to write record file {data_file}: {error}.") from error
