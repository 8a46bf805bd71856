"""Unit tests for container file IO."""

from __future__ import annotations

import json

import pytest

from core.errors import StorageReadError, StorageWriteError
from store.container_io import read_container, write_container


def test_write_container_roundtrips_items(tmp_path) -> None:
    """Written items should be read back in order."""
    data_file = tmp_path / "data.json"
    items = [{"id": "2", "name": "b"}, {"id": "1", "name": "a"}]

    write_container(data_file, items)

    assert read_container(data_file) == items


def test_write_container_uses_items_key(tmp_path) -> None:
    """The file should hold a single top-level items list."""
    data_file = tmp_path / "data.json"

    write_container(data_file, [{"id": "1"}])
    payload = json.loads(data_file.read_text(encoding="utf-8"))

    assert list(payload) == ["items"]


def test_write_container_raises_when_parent_is_file(tmp_path) -> None:
    """Unwritable locations should raise a write error."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(StorageWriteError):
        write_container(blocker / "data.json", [])

    assert blocker.is_file()


def test_failed_replace_keeps_previous_container(tmp_path, monkeypatch) -> None:
    """A failed replace should leave the old file and no temp files."""
    data_file = tmp_path / "data.json"
    write_container(data_file, [{"id": "1"}])
    before = data_file.read_text(encoding="utf-8")

    def _raise_replace(source, target) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("store.container_io.os.replace", _raise_replace)

    with pytest.raises(StorageWriteError):
        write_container(data_file, [])

    assert (
        data_file.read_text(encoding="utf-8") == before
        and sorted(path.name for path in tmp_path.iterdir()) == ["data.json"]
    )


def test_read_container_raises_for_missing_file(tmp_path) -> None:
    """Missing files should raise a read error."""
    with pytest.raises(StorageReadError):
        read_container(tmp_path / "missing.json")

    assert True
