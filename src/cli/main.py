"""recordkeeper CLI entry points.

This module exposes the create, list, find, update and delete commands.
It maps argparse commands onto record store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console

from cli.record_commands import (
    add_create_command,
    add_delete_command,
    add_find_command,
    add_list_command,
    add_update_command,
    run_create_command,
    run_delete_command,
    run_find_command,
    run_list_command,
    run_update_command,
)
from cli.render import render_banner, render_failure
from core.config import RecordKeeperConfig
from core.constants import APP_DESCRIPTION, APP_NAME, APP_VERSION, DATA_FILE_ENV_VAR
from core.errors import RecordKeeperError
from core.logging_config import configure_logging
from store.record_store import RecordStore

CommandRunner = Callable[[RecordStore, Console, argparse.Namespace], int]

_COMMAND_RUNNERS: dict[str, CommandRunner] = {
    "create": run_create_command,
    "list": run_list_command,
    "find": run_find_command,
    "update": run_update_command,
    "delete": run_delete_command,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    parser.add_argument("--data-file", help=f"Override {DATA_FILE_ENV_VAR} for this command")
    subparsers = parser.add_subparsers(dest="command_alias", metavar="command")
    add_create_command(subparsers)
    add_list_command(subparsers)
    add_find_command(subparsers)
    add_update_command(subparsers)
    add_delete_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recordkeeper CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    console = Console()
    parser = build_parser()
    render_banner(console)
    args = parser.parse_args(argv)
    command = getattr(args, "command", None)
    if command is None:
        parser.print_help()
        return 0
    try:
        store = _build_store(args.data_file)
        return _COMMAND_RUNNERS[command](store, console, args)
    except RecordKeeperError as error:
        render_failure(Console(stderr=True), f"error: {error}")
        return 1


def _build_store(data_file: str | None) -> RecordStore:
    """Build and initialize the record store with optional file override.

    Args:
        data_file: Optional override path.

    Returns:
        Initialized record store.
    """
    config = RecordKeeperConfig.from_env()
    if data_file:
        config = replace(config, data_file=Path(data_file).expanduser().resolve())
    configure_logging(config.log_level)
    store = RecordStore(config.data_file)
    store.initialize()
    return store
