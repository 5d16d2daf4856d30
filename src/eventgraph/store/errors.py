"""Exceptions raised by the entity store."""

from typing import Any


class EventGraphError(Exception):
    """Base exception for store operations."""

    pass


class RecordNotFoundError(EventGraphError):
    """Raised when a mutation targets an id that matches no record."""

    def __init__(self, kind: str, record_id: Any):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class SeedDataError(EventGraphError):
    """Seed file could not be read or has the wrong shape."""

    pass
