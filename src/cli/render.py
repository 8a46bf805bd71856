"""Terminal rendering helpers for the recordkeeper CLI."""

from __future__ import annotations

import json

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.constants import BANNER_TEXT, LIST_SEPARATOR_WIDTH
from core.types import Record
from store.record_payload import record_to_payload


def render_banner(console: Console) -> None:
    """Clear an interactive screen and print the application banner."""
    if console.is_terminal:
        console.clear()
    console.print(Panel(Text(BANNER_TEXT, style="bold yellow", justify="center"), expand=False))


def render_success(console: Console, message: str) -> None:
    """Print a green status line."""
    console.print(message, style="green", markup=False, highlight=False, soft_wrap=True)


def render_notice(console: Console, message: str) -> None:
    """Print a yellow informational line."""
    console.print(message, style="yellow", markup=False, highlight=False, soft_wrap=True)


def render_failure(console: Console, message: str) -> None:
    """Print a red not-found or error line."""
    console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)


def render_record(console: Console, record: Record) -> None:
    """Print one record as indented JSON."""
    body = json.dumps(record_to_payload(record), indent=2, ensure_ascii=False)
    console.print(body, style="cyan", markup=False, highlight=False, soft_wrap=True)


def render_record_listing(console: Console, records: tuple[Record, ...]) -> None:
    """Print records as labelled lines separated by dashes."""
    for record in records:
        for line in (
            f"ID: {record.id}",
            f"Name: {record.name}",
            f"Description: {record.description}",
            "-" * LIST_SEPARATOR_WIDTH,
        ):
            console.print(line, style="cyan", markup=False, highlight=False, soft_wrap=True)
