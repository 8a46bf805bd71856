"""Integration tests for the record store lifecycle."""

from __future__ import annotations

from dataclasses import replace

from recordkeeper import Record, RecordDraft, RecordKeeperConfig, RecordStore


def test_record_lifecycle_flow(tmp_path) -> None:
    """End-to-end flow should add, list, update and delete records."""
    config = replace(RecordKeeperConfig.from_env(), data_file=tmp_path / "data.json")
    store = RecordStore(config.data_file)
    store.initialize()

    milk = store.add(RecordDraft(name="Milk", description="2%"))
    eggs = store.add(RecordDraft(name="Eggs", description="dozen"))
    listed = store.list_all()
    updated = store.update_by_id(milk.id, {"description": "whole"})
    deleted = store.delete_by_id(eggs.id)

    assert (
        [record.name for record in listed] == ["Milk", "Eggs"]
        and milk.id != eggs.id
        and all(record.id for record in listed)
        and updated == Record(id=milk.id, name="Milk", description="whole")
        and deleted
        and store.list_all() == (updated,)
    )


def test_records_survive_new_store_instances(tmp_path) -> None:
    """A second store on the same file should see persisted records."""
    data_file = tmp_path / "data.json"
    first_store = RecordStore(data_file)
    first_store.initialize()
    record = first_store.add(RecordDraft(name="A", description="B"))

    second_store = RecordStore(data_file)
    second_store.initialize()

    assert second_store.find_by_id(record.id) == record
