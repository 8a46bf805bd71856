"""Unit tests for terminal rendering helpers."""

from __future__ import annotations

import io

from rich.console import Console

from cli.render import render_failure


def test_render_failure_does_not_wrap_long_lines() -> None:
    """Status lines should stay on one line in narrow piped output."""
    console = Console(file=io.StringIO(), width=40)
    message = f"Item with ID {'x' * 60} not found"

    render_failure(console, message)

    assert console.file.getvalue() == message + "\n"
