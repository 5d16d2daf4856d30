"""
Foreign key resolution between entities.

Every function does one linear scan per call; nothing is cached or batched.
A reference to a missing record resolves to ``None`` (or an empty list),
never to an error.
"""

from enum import Enum
from typing import Any, Protocol

from .ids import ids_match
from .records import Event, Location, Participant, User
from .store import EntityStore


class UserLike(Protocol):
    id: Any


class EventLike(Protocol):
    """An event record or any object exposing the same id fields."""

    id: Any
    user_id: Any
    location_id: Any


class ParticipantMatch(str, Enum):
    """Which event field selects the participants of an event."""

    # participant.user_id == event.user_id (the long-standing behavior)
    USER = "user"
    # participant.event_id == event.id
    EVENT = "event"


def user_events(store: EntityStore, user: UserLike) -> list[Event]:
    """Events owned by ``user``."""
    return store.events.filter(lambda event: ids_match(event.user_id, user.id))


def event_user(store: EntityStore, event: EventLike) -> User | None:
    """The user owning ``event``."""
    return store.users.find(event.user_id)


def event_location(store: EntityStore, event: EventLike) -> Location | None:
    return store.locations.find(event.location_id)


def event_participants(
    store: EntityStore,
    event: EventLike,
    match: ParticipantMatch = ParticipantMatch.USER,
) -> list[Participant]:
    """
    Participants attached to ``event``.

    By default participants are selected by the event owner's ``user_id``,
    so every event of the same owner lists the same participants. Pass
    ``ParticipantMatch.EVENT`` to select them by ``event_id`` instead.
    """
    if match == ParticipantMatch.EVENT:
        return store.participants.filter(lambda p: ids_match(p.event_id, event.id))
    return store.participants.filter(lambda p: ids_match(p.user_id, event.user_id))
