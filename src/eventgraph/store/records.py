"""
Entity records held by the store.

Each record type lists its writable fields (everything but ``id``) in
``FIELDS``; creation and partial updates only touch those.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from .ids import RecordId

# Keys that differ between the wire/seed format and the Python attribute
_WIRE_TO_ATTR = {"from": "from_"}
_ATTR_TO_WIRE = {attr: key for key, attr in _WIRE_TO_ATTR.items()}


class Record:
    """Shared mapping conversions for entity records."""

    KIND: ClassVar[str]
    FIELDS: ClassVar[tuple[str, ...]]

    id: RecordId

    @classmethod
    def normalize_keys(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        """Rename wire keys to attribute names and drop unknown keys."""
        normalized = {}
        for key, value in data.items():
            attr = _WIRE_TO_ATTR.get(key, key)
            if attr == "id" or attr in cls.FIELDS:
                normalized[attr] = value
        return normalized

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        values = cls.normalize_keys(data)
        if "id" not in values:
            raise KeyError(f"{cls.KIND} record is missing an id")
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        for attr in self.FIELDS:
            result[_ATTR_TO_WIRE.get(attr, attr)] = getattr(self, attr)
        return result


@dataclass
class User(Record):
    KIND: ClassVar[str] = "User"
    FIELDS: ClassVar[tuple[str, ...]] = ("username", "email")

    id: RecordId
    username: str | None = None
    email: str | None = None


@dataclass
class Event(Record):
    KIND: ClassVar[str] = "Event"
    FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "desc",
        "date",
        "from_",
        "to",
        "location_id",
        "user_id",
    )

    id: RecordId
    title: str | None = None
    desc: str | None = None
    date: str | None = None
    from_: str | None = None
    to: str | None = None
    location_id: RecordId | None = None
    user_id: RecordId | None = None


@dataclass
class Location(Record):
    KIND: ClassVar[str] = "Location"
    FIELDS: ClassVar[tuple[str, ...]] = ("name", "desc", "lat", "lng")

    id: RecordId
    name: str | None = None
    desc: str | None = None
    lat: float | None = None
    lng: float | None = None


@dataclass
class Participant(Record):
    KIND: ClassVar[str] = "Participant"
    FIELDS: ClassVar[tuple[str, ...]] = ("user_id", "event_id")

    id: RecordId
    user_id: RecordId | None = None
    event_id: RecordId | None = None
