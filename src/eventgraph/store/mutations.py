"""
Create, update and delete operations on store collections.

Each operation is a single synchronous step against the shared collection
and is visible to every later query on the same store.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from ..logging import get_logger
from .errors import RecordNotFoundError
from .ids import new_record_id
from .records import Record
from .store import Collection

logger = get_logger(__name__)

R = TypeVar("R", bound=Record)


def apply_changes(record: Record, changes: Mapping[str, Any]) -> None:
    """Set every writable field present in ``changes``; leave the rest alone.

    ``None`` values are applied like any other value.
    """
    normalized = record.normalize_keys(changes)
    for attr in record.FIELDS:
        if attr in normalized:
            setattr(record, attr, normalized[attr])


def create_record(collection: Collection[R], data: Mapping[str, Any] | None = None) -> R:
    """Append a new record with a fresh id and the supplied fields."""
    record = collection.record_type(id=new_record_id())
    apply_changes(record, data or {})
    collection.append(record)

    logger.info("Record created", kind=collection.kind, record_id=record.id)
    return record


def update_record(
    collection: Collection[R], record_id: Any, changes: Mapping[str, Any] | None = None
) -> R:
    """
    Update the fields of an existing record in place.

    Raises:
        RecordNotFoundError: If no record matches ``record_id``
    """
    index = collection.index_of(record_id)
    if index == -1:
        logger.info("Record not found for update", kind=collection.kind, record_id=record_id)
        raise RecordNotFoundError(collection.kind, record_id)

    record = collection.get(index)
    apply_changes(record, changes or {})

    logger.info("Record updated", kind=collection.kind, record_id=record.id)
    return record


def delete_record(collection: Collection[R], record_id: Any) -> R:
    """
    Remove a single record and return it.

    Raises:
        RecordNotFoundError: If no record matches ``record_id``
    """
    index = collection.index_of(record_id)
    if index == -1:
        logger.info("Record not found for delete", kind=collection.kind, record_id=record_id)
        raise RecordNotFoundError(collection.kind, record_id)

    record = collection.pop(index)

    logger.info("Record deleted", kind=collection.kind, record_id=record.id)
    return record


def delete_all_records(collection: Collection[Any]) -> int:
    """Remove every record of the collection; returns the number removed."""
    count = collection.clear()
    logger.info("All records deleted", kind=collection.kind, count=count)
    return count
