"""
Location GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

from .common import wire_id

if TYPE_CHECKING:
    from ...store.records import Location as LocationRecord


@strawberry.type
class Location:
    """Location type for GraphQL API."""

    id: str | None
    name: str | None
    desc: str | None
    lat: float | None
    lng: float | None

    @classmethod
    def from_record(cls, record: "LocationRecord") -> "Location":
        return cls(
            id=wire_id(record.id),
            name=record.name,
            desc=record.desc,
            lat=record.lat,
            lng=record.lng,
        )


@strawberry.input(name="createLocationInput")
class CreateLocationInput:
    name: str | None = None
    desc: str | None = None
    lat: float | None = None
    lng: float | None = None


@strawberry.input(name="updateLocationInput")
class UpdateLocationInput:
    name: str | None = strawberry.UNSET
    desc: str | None = strawberry.UNSET
    lat: float | None = strawberry.UNSET
    lng: float | None = strawberry.UNSET
