"""Record command wiring for the recordkeeper CLI.

Each command registers an argparse subparser with a one-letter alias
and maps its arguments onto a single record store call.
"""

from __future__ import annotations

import argparse
from typing import Any

from rich.console import Console

from cli.prompts import RECORD_FORM, confirm, fill_form
from cli.render import (
    render_failure,
    render_notice,
    render_record,
    render_record_listing,
    render_success,
)
from core.constants import RECORD_DESCRIPTION_FIELD, RECORD_NAME_FIELD
from core.types import RecordDraft
from store.record_store import RecordStore


def add_create_command(subparsers: Any) -> None:
    """Register create subcommand."""
    parser = subparsers.add_parser("create", aliases=["c"], help="Add a new item")
    parser.set_defaults(command="create")


def add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", aliases=["l"], help="List all items")
    parser.set_defaults(command="list")


def add_find_command(subparsers: Any) -> None:
    """Register find subcommand."""
    parser = subparsers.add_parser("find", aliases=["f"], help="Find an item by ID")
    parser.add_argument("id", help="Item ID")
    parser.set_defaults(command="find")


def add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser("update", aliases=["u"], help="Update an item")
    parser.add_argument("id", help="Item ID")
    parser.set_defaults(command="update")


def add_delete_command(subparsers: Any) -> None:
    """Register delete subcommand."""
    parser = subparsers.add_parser("delete", aliases=["d"], help="Delete an item")
    parser.add_argument("id", help="Item ID")
    parser.set_defaults(command="delete")


def run_create_command(store: RecordStore, console: Console, args: argparse.Namespace) -> int:
    """Prompt for a new record and add it.

    Args:
        store: Initialized record store.
        console: Output console.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    del args
    answers = fill_form(console, RECORD_FORM)
    record = store.add(
        RecordDraft(
            name=answers[RECORD_NAME_FIELD],
            description=answers[RECORD_DESCRIPTION_FIELD],
        )
    )
    render_success(console, "Item added successfully:")
    render_record(console, record)
    return 0


def run_list_command(store: RecordStore, console: Console, args: argparse.Namespace) -> int:
    """Print every stored record."""
    del args
    records = store.list_all()
    if not records:
        render_notice(console, "No items found")
        return 0
    render_success(console, "Items:")
    render_record_listing(console, records)
    return 0


def run_find_command(store: RecordStore, console: Console, args: argparse.Namespace) -> int:
    """Print one record by id."""
    record = store.find_by_id(args.id)
    if record is None:
        render_failure(console, _not_found_message(args.id))
        return 0
    render_success(console, "Item found:")
    render_record(console, record)
    return 0


def run_update_command(store: RecordStore, console: Console, args: argparse.Namespace) -> int:
    """Prompt with current values and update one record.

    Args:
        store: Initialized record store.
        console: Output console.
        args: Parsed CLI args.

    Returns:
        Exit code. Not-found is reported and still exits zero.
    """
    record = store.find_by_id(args.id)
    if record is None:
        render_failure(console, _not_found_message(args.id))
        return 0
    answers = fill_form(
        console,
        RECORD_FORM,
        defaults=_prompt_defaults(
            {
                RECORD_NAME_FIELD: record.name,
                RECORD_DESCRIPTION_FIELD: record.description,
            }
        ),
    )
    updated = store.update_by_id(args.id, answers)
    if updated is None:
        render_failure(console, _not_found_message(args.id))
        return 0
    render_success(console, "Item updated successfully:")
    render_record(console, updated)
    return 0


def run_delete_command(store: RecordStore, console: Console, args: argparse.Namespace) -> int:
    """Confirm and delete one record.

    Declining the confirmation returns before the store is touched.
    """
    if not confirm(console, f"Are you sure you want to delete item with ID {args.id}?"):
        render_notice(console, "Delete operation cancelled")
        return 0
    if store.delete_by_id(args.id):
        render_success(console, f"Item with ID {args.id} deleted successfully")
    else:
        render_failure(console, _not_found_message(args.id))
    return 0


def _not_found_message(record_id: str) -> str:
    return f"Item with ID {record_id} not found"


def _prompt_defaults(values: dict[str, object]) -> dict[str, str]:
    # Null values get no default; other values are pre-filled as text.
    return {key: str(value) for key, value in values.items() if value is not None}
