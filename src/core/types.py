"""Shared typed models.

This module defines immutable record models used by the store,
the SDK surface and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class RecordDraft:
    """Candidate record collected before the store assigns an id.

    Attributes:
        name: Non-empty record name.
        description: Non-empty record description.
    """

    name: str
    description: str


@dataclass(frozen=True)
class Record:
    """Canonical stored record.

    Name and description hold whatever JSON value is stored, usually a
    string; the store never converts them. Records compare by value but
    are unhashable because extra fields may hold lists and objects.

    Attributes:
        id: Store-assigned identifier, immutable after creation.
        name: Record name.
        description: Record description.
        extra_fields: Read-only view of fields merged in by updates.
    """

    id: str
    name: object
    description: object
    extra_fields: Mapping[str, object] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_fields", MappingProxyType(dict(self.extra_fields)))
