"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.records import User as UserRecord
from .common import wire_id

if TYPE_CHECKING:
    from .event import Event


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    username: str | None
    email: str | None
    # Relations resolve against the stored ids, not their wire strings
    record: strawberry.Private[UserRecord]

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=wire_id(record.id),
            username=record.username,
            email=record.email,
            record=record,
        )

    @strawberry.field
    async def events(
        self, info: strawberry.Info
    ) -> list[Annotated["Event", strawberry.lazy(".event")]]:
        """Get events owned by this user."""
        from ..resolvers.user import resolve_user_events

        return await resolve_user_events(self, info)


@strawberry.input(name="createUserInput")
class CreateUserInput:
    """Input for creating a user."""

    username: str
    email: str


@strawberry.input(name="updateUserInput")
class UpdateUserInput:
    """Input for updating a user; omitted fields are left unchanged."""

    username: str | None = strawberry.UNSET
    email: str | None = strawberry.UNSET
