"""
Shared GraphQL types and helpers
"""

import dataclasses
from typing import Any

import strawberry

from ...store.ids import RecordId


@strawberry.type(name="deleteAllOutput")
class DeleteAllOutput:
    """Result of a deleteAll mutation."""

    count: int


def wire_id(value: RecordId | None) -> strawberry.ID | None:
    """Render a record id (int or str) as a GraphQL ID."""
    if value is None:
        return None
    return strawberry.ID(str(value))


def provided_fields(data: Any) -> dict[str, Any]:
    """Fields of a Strawberry input the client actually sent.

    Omitted fields are ``UNSET`` and left out; an explicit ``null`` is kept
    as ``None``.
    """
    if data is None:
        return {}
    return {
        field.name: getattr(data, field.name)
        for field in dataclasses.fields(data)
        if getattr(data, field.name) is not strawberry.UNSET
    }
