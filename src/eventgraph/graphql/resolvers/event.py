from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import mutations, relations
from ..context import get_participant_match_from_info, get_store_from_info
from ..types.common import DeleteAllOutput, provided_fields

if TYPE_CHECKING:
    from ..types.event import CreateEventInput, Event, UpdateEventInput
    from ..types.location import Location
    from ..types.participant import Participant
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_events(info: strawberry.Info) -> list[Event]:
    from ..types.event import Event

    store = get_store_from_info(info)
    return [Event.from_record(record) for record in store.events]


async def resolve_event_by_id(info: strawberry.Info, id: str) -> Event | None:
    from ..types.event import Event

    record = get_store_from_info(info).events.find(id)
    return Event.from_record(record) if record else None


# Field resolvers
async def resolve_event_user(event: Event, info: strawberry.Info) -> User | None:
    """
    Resolve the owner of an event.

    A dangling ``user_id`` resolves to null rather than an error.
    """
    from ..types.user import User

    record = relations.event_user(get_store_from_info(info), event.record)
    if record is None:
        logger.debug("Event owner not found", event_id=event.id, user_id=event.user_id)
        return None
    return User.from_record(record)


async def resolve_event_location(event: Event, info: strawberry.Info) -> Location | None:
    from ..types.location import Location

    record = relations.event_location(get_store_from_info(info), event.record)
    if record is None:
        logger.debug(
            "Event location not found", event_id=event.id, location_id=event.location_id
        )
        return None
    return Location.from_record(record)


async def resolve_event_participants(event: Event, info: strawberry.Info) -> list[Participant]:
    from ..types.participant import Participant

    records = relations.event_participants(
        get_store_from_info(info), event.record, get_participant_match_from_info(info)
    )
    return [Participant.from_record(record) for record in records]


# Mutation resolvers
async def create_event(info: strawberry.Info, data: CreateEventInput | None) -> Event:
    from ..types.event import Event

    store = get_store_from_info(info)
    record = mutations.create_record(store.events, provided_fields(data))
    return Event.from_record(record)


async def update_event(info: strawberry.Info, id: str, data: UpdateEventInput | None) -> Event:
    from ..types.event import Event

    store = get_store_from_info(info)
    record = mutations.update_record(store.events, id, provided_fields(data))
    return Event.from_record(record)


async def delete_event(info: strawberry.Info, id: str) -> Event:
    from ..types.event import Event

    store = get_store_from_info(info)
    return Event.from_record(mutations.delete_record(store.events, id))


async def delete_all_events(info: strawberry.Info) -> DeleteAllOutput:
    store = get_store_from_info(info)
    return DeleteAllOutput(count=mutations.delete_all_records(store.events))
