"""
Event GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.records import Event as EventRecord
from .common import wire_id
from .location import Location
from .participant import Participant

if TYPE_CHECKING:
    from .user import User


@strawberry.type
class Event:
    """Event type for GraphQL API."""

    id: str | None
    title: str | None
    desc: str | None
    date: str | None
    from_: str | None = strawberry.field(name="from")
    to: str | None
    location_id: strawberry.ID | None
    user_id: strawberry.ID | None
    record: strawberry.Private[EventRecord]

    @classmethod
    def from_record(cls, record: EventRecord) -> "Event":
        return cls(
            id=wire_id(record.id),
            title=record.title,
            desc=record.desc,
            date=record.date,
            from_=record.from_,
            to=record.to,
            location_id=wire_id(record.location_id),
            user_id=wire_id(record.user_id),
            record=record,
        )

    @strawberry.field
    async def user(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who owns this event."""
        from ..resolvers.event import resolve_event_user

        return await resolve_event_user(self, info)

    @strawberry.field
    async def location(self, info: strawberry.Info) -> Location | None:
        """Get the location of this event."""
        from ..resolvers.event import resolve_event_location

        return await resolve_event_location(self, info)

    @strawberry.field
    async def participants(self, info: strawberry.Info) -> list[Participant]:
        """Get the participants of this event."""
        from ..resolvers.event import resolve_event_participants

        return await resolve_event_participants(self, info)


@strawberry.input(name="createEventInput")
class CreateEventInput:
    """Input for creating an event."""

    location_id: strawberry.ID
    user_id: strawberry.ID
    title: str | None = None
    desc: str | None = None
    date: str | None = None
    from_: str | None = strawberry.field(name="from", default=None)
    to: str | None = None


@strawberry.input(name="updateEventInput")
class UpdateEventInput:
    """Input for updating an event; omitted fields are left unchanged."""

    title: str | None = strawberry.UNSET
    desc: str | None = strawberry.UNSET
    date: str | None = strawberry.UNSET
    from_: str | None = strawberry.field(name="from", default=strawberry.UNSET)
    to: str | None = strawberry.UNSET
    location_id: strawberry.ID | None = strawberry.UNSET
    user_id: strawberry.ID | None = strawberry.UNSET
