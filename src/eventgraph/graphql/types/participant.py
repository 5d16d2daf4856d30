"""
Participant GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

from .common import wire_id

if TYPE_CHECKING:
    from ...store.records import Participant as ParticipantRecord


@strawberry.type
class Participant:
    """Participant type for GraphQL API; links a user to an event."""

    id: strawberry.ID
    user_id: strawberry.ID | None
    event_id: strawberry.ID | None

    @classmethod
    def from_record(cls, record: "ParticipantRecord") -> "Participant":
        return cls(
            id=wire_id(record.id),
            user_id=wire_id(record.user_id),
            event_id=wire_id(record.event_id),
        )


@strawberry.input(name="createParticipantInput")
class CreateParticipantInput:
    user_id: strawberry.ID
    event_id: strawberry.ID


@strawberry.input(name="updateParticipantInput")
class UpdateParticipantInput:
    user_id: strawberry.ID | None = strawberry.UNSET
    event_id: strawberry.ID | None = strawberry.UNSET
