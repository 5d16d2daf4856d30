"""
In-memory entity store, relation resolution and mutations.
"""

from .errors import EventGraphError, RecordNotFoundError, SeedDataError
from .ids import ids_match, new_record_id
from .records import Event, Location, Participant, User
from .relations import (
    ParticipantMatch,
    event_location,
    event_participants,
    event_user,
    user_events,
)
from .seed_data import load_default_store, load_seed
from .store import Collection, EntityStore

__all__ = [
    "Collection",
    "EntityStore",
    "Event",
    "EventGraphError",
    "Location",
    "Participant",
    "ParticipantMatch",
    "RecordNotFoundError",
    "SeedDataError",
    "User",
    "event_location",
    "event_participants",
    "event_user",
    "ids_match",
    "load_default_store",
    "load_seed",
    "new_record_id",
    "user_events",
]
