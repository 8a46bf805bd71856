"""Unit tests for shared record models."""

from __future__ import annotations

import pytest

from core.types import Record


def test_record_extra_fields_are_read_only() -> None:
    """Extra fields should not be mutable through a frozen record."""
    record = Record(id="1", name="N", description="D", extra_fields={"color": "blue"})

    with pytest.raises(TypeError):
        record.extra_fields["color"] = "red"  # type: ignore[index]

    assert record.extra_fields == {"color": "blue"}


def test_record_is_unhashable() -> None:
    """Records compare by value but cannot be used as set members."""
    record = Record(id="1", name="N", description="D")

    with pytest.raises(TypeError):
        hash(record)

    assert record == Record(id="1", name="N", description="D")
