"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.common import DeleteAllOutput
from ..types.event import CreateEventInput, Event, UpdateEventInput
from ..types.location import CreateLocationInput, Location, UpdateLocationInput
from ..types.participant import CreateParticipantInput, Participant, UpdateParticipantInput
from ..types.user import CreateUserInput, UpdateUserInput, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self, info: strawberry.Info, data: CreateUserInput | None = None
    ) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, data)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, data: UpdateUserInput | None = None
    ) -> User:
        """Update an existing user."""
        from ..resolvers.user import update_user

        return await update_user(info, id, data)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> User:
        """Delete a user and return it."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)

    @strawberry.mutation(name="deleteAllUsers")
    async def delete_all_users(self, info: strawberry.Info) -> DeleteAllOutput:
        """Delete every user."""
        from ..resolvers.user import delete_all_users

        return await delete_all_users(info)

    # Event mutations
    @strawberry.mutation(name="createEvent")
    async def create_event(
        self, info: strawberry.Info, data: CreateEventInput | None = None
    ) -> Event:
        """Create a new event."""
        from ..resolvers.event import create_event

        return await create_event(info, data)

    @strawberry.mutation(name="updateEvent")
    async def update_event(
        self, info: strawberry.Info, id: strawberry.ID, data: UpdateEventInput | None = None
    ) -> Event:
        """Update an existing event."""
        from ..resolvers.event import update_event

        return await update_event(info, id, data)

    @strawberry.mutation(name="deleteEvent")
    async def delete_event(self, info: strawberry.Info, id: strawberry.ID) -> Event:
        """Delete an event and return it."""
        from ..resolvers.event import delete_event

        return await delete_event(info, id)

    @strawberry.mutation(name="deleteAllEvents")
    async def delete_all_events(self, info: strawberry.Info) -> DeleteAllOutput:
        """Delete every event."""
        from ..resolvers.event import delete_all_events

        return await delete_all_events(info)

    # Location mutations
    @strawberry.mutation(name="createLocation")
    async def create_location(
        self, info: strawberry.Info, data: CreateLocationInput | None = None
    ) -> Location:
        """Create a new location."""
        from ..resolvers.location import create_location

        return await create_location(info, data)

    @strawberry.mutation(name="updateLocation")
    async def update_location(
        self, info: strawberry.Info, id: strawberry.ID, data: UpdateLocationInput | None = None
    ) -> Location:
        """Update an existing location."""
        from ..resolvers.location import update_location

        return await update_location(info, id, data)

    @strawberry.mutation(name="deleteLocation")
    async def delete_location(self, info: strawberry.Info, id: strawberry.ID) -> Location:
        """Delete a location and return it."""
        from ..resolvers.location import delete_location

        return await delete_location(info, id)

    @strawberry.mutation(name="deleteAllLocations")
    async def delete_all_locations(self, info: strawberry.Info) -> DeleteAllOutput:
        """Delete every location."""
        from ..resolvers.location import delete_all_locations

        return await delete_all_locations(info)

    # Participant mutations
    @strawberry.mutation(name="createParticipant")
    async def create_participant(
        self, info: strawberry.Info, data: CreateParticipantInput | None = None
    ) -> Participant:
        """Create a new participant."""
        from ..resolvers.participant import create_participant

        return await create_participant(info, data)

    @strawberry.mutation(name="updateParticipant")
    async def update_participant(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        data: UpdateParticipantInput | None = None,
    ) -> Participant:
        """Update an existing participant."""
        from ..resolvers.participant import update_participant

        return await update_participant(info, id, data)

    @strawberry.mutation(name="deleteParticipant")
    async def delete_participant(self, info: strawberry.Info, id: strawberry.ID) -> Participant:
        """Delete a participant and return it."""
        from ..resolvers.participant import delete_participant

        return await delete_participant(info, id)

    @strawberry.mutation(name="deleteAllParticipants")
    async def delete_all_participants(self, info: strawberry.Info) -> DeleteAllOutput:
        """Delete every participant."""
        from ..resolvers.participant import delete_all_participants

        return await delete_all_participants(info)
