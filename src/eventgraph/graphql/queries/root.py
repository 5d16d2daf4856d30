"""
Root GraphQL query definitions
"""

import strawberry

from ..types.event import Event
from ..types.location import Location
from ..types.participant import Participant
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # User
    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    # Event
    @strawberry.field
    async def events(self, info: strawberry.Info) -> list[Event]:
        """Get all events."""
        from ..resolvers.event import resolve_events

        return await resolve_events(info)

    @strawberry.field
    async def event(self, info: strawberry.Info, id: strawberry.ID) -> Event | None:
        """Get an event by ID."""
        from ..resolvers.event import resolve_event_by_id

        return await resolve_event_by_id(info, id)

    # Location
    @strawberry.field
    async def locations(self, info: strawberry.Info) -> list[Location]:
        """Get all locations."""
        from ..resolvers.location import resolve_locations

        return await resolve_locations(info)

    @strawberry.field
    async def location(self, info: strawberry.Info, id: strawberry.ID) -> Location | None:
        """Get a location by ID."""
        from ..resolvers.location import resolve_location_by_id

        return await resolve_location_by_id(info, id)

    # Participant
    @strawberry.field
    async def participants(self, info: strawberry.Info) -> list[Participant]:
        """Get all participants."""
        from ..resolvers.participant import resolve_participants

        return await resolve_participants(info)

    @strawberry.field
    async def participant(self, info: strawberry.Info, id: strawberry.ID) -> Participant | None:
        """Get a participant by ID."""
        from ..resolvers.participant import resolve_participant_by_id

        return await resolve_participant_by_id(info, id)
