"""
Tests for GraphQL mutations
"""

import pytest

from eventgraph.graphql.schema import create_schema
from eventgraph.store import EntityStore

schema = create_schema()


async def execute(query: str, context: dict, **variables):
    return await schema.execute(query, variable_values=variables or None, context_value=context)


class TestUserMutations:
    @pytest.mark.asyncio
    async def test_create_user(self, context, store: EntityStore) -> None:
        result = await execute(
            """
            mutation CreateUser($data: createUserInput) {
              createUser(data: $data) { id username email events { id } }
            }
            """,
            context,
            data={"username": "X", "email": "x@x.com"},
        )

        assert result.errors is None
        created = result.data["createUser"]
        assert created["username"] == "X"
        assert created["email"] == "x@x.com"
        assert created["events"] == []
        assert store.users.find(created["id"]).username == "X"

        listing = await execute("{ users { id } }", context)
        assert created["id"] in [u["id"] for u in listing.data["users"]]

    @pytest.mark.asyncio
    async def test_update_user_keeps_omitted_fields(self, context) -> None:
        result = await execute(
            'mutation { updateUser(id: "1", data: { email: "s@example.com" }) '
            "{ id username email } }",
            context,
        )

        assert result.errors is None
        assert result.data["updateUser"] == {
            "id": "1",
            "username": "Strawberry6",
            "email": "s@example.com",
        }

    @pytest.mark.asyncio
    async def test_update_user_explicit_null(self, context, store: EntityStore) -> None:
        result = await execute(
            'mutation { updateUser(id: 3, data: { username: null }) { username email } }',
            context,
        )

        assert result.errors is None
        assert result.data["updateUser"] == {"username": None, "email": "currant5@gmail.com"}
        assert store.users.find(3).username is None

    @pytest.mark.asyncio
    async def test_update_missing_user(self, context, store: EntityStore) -> None:
        result = await execute(
            'mutation { updateUser(id: "999", data: { username: "ghost" }) { id } }',
            context,
        )

        assert result.data is None
        assert result.errors[0].message == "User not found"
        assert len(store.users) == 25
        assert all(user.username != "ghost" for user in store.users)

    @pytest.mark.asyncio
    async def test_delete_user(self, context, store: EntityStore) -> None:
        result = await execute('mutation { deleteUser(id: "2") { id username } }', context)

        assert result.errors is None
        assert result.data["deleteUser"] == {"id": "2", "username": "Apple3"}
        assert store.users.find(2) is None

    @pytest.mark.asyncio
    async def test_delete_all_users(self, context) -> None:
        result = await execute("mutation { deleteAllUsers { count } }", context)

        assert result.data["deleteAllUsers"] == {"count": 25}


class TestEventMutations:
    @pytest.mark.asyncio
    async def test_create_event_resolves_relations(self, context) -> None:
        result = await execute(
            """
            mutation {
              createEvent(data: {
                title: "Board games", date: "2024-01-01", from: "18:00", to: "22:00",
                location_id: "3", user_id: "2"
              }) {
                id title from to location_id user_id
                user { username }
                location { name }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        event = result.data["createEvent"]
        assert event["title"] == "Board games"
        assert event["from"] == "18:00"
        assert event["user"] == {"username": "Apple3"}
        assert event["location"] == {"name": "New Reuben"}

        owned = await execute('{ user(id: 2) { events { id } } }', context)
        assert owned.data["user"]["events"] == [{"id": event["id"]}]

    @pytest.mark.asyncio
    async def test_update_event(self, context) -> None:
        result = await execute(
            'mutation { updateEvent(id: "1", data: { title: "Poker", from: "20:00" }) '
            "{ title from to } }",
            context,
        )

        assert result.errors is None
        assert result.data["updateEvent"] == {"title": "Poker", "from": "20:00", "to": "12:00"}

    @pytest.mark.asyncio
    async def test_delete_event_then_query(self, context) -> None:
        deleted = await execute('mutation { deleteEvent(id: "1") { id title } }', context)
        assert deleted.data["deleteEvent"] == {"id": "1", "title": "Poker night"}

        result = await execute('{ event(id: "1") { id } }', context)
        assert result.data["event"] is None

    @pytest.mark.asyncio
    async def test_delete_missing_event(self, context) -> None:
        result = await execute('mutation { deleteEvent(id: "nope") { id } }', context)

        assert result.errors[0].message == "Event not found"

    @pytest.mark.asyncio
    async def test_delete_all_events_twice(self, context) -> None:
        first = await execute("mutation { deleteAllEvents { count } }", context)
        second = await execute("mutation { deleteAllEvents { count } }", context)

        assert first.data["deleteAllEvents"] == {"count": 25}
        assert second.data["deleteAllEvents"] == {"count": 0}


class TestLocationMutations:
    @pytest.mark.asyncio
    async def test_create_update_delete_location(self, context, store: EntityStore) -> None:
        created = await execute(
            'mutation { createLocation(data: { name: "Hall", lat: 1.5, lng: -2.25 }) '
            "{ id name desc lat lng } }",
            context,
        )
        assert created.errors is None
        location = created.data["createLocation"]
        assert location["desc"] is None
        assert (location["lat"], location["lng"]) == (1.5, -2.25)

        updated = await execute(
            "mutation Update($id: ID!) { updateLocation(id: $id, data: { lat: 0 }) "
            "{ name lat lng } }",
            context,
            id=location["id"],
        )
        assert updated.data["updateLocation"] == {"name": "Hall", "lat": 0.0, "lng": -2.25}

        deleted = await execute(
            "mutation Delete($id: ID!) { deleteLocation(id: $id) { name } }",
            context,
            id=location["id"],
        )
        assert deleted.data["deleteLocation"] == {"name": "Hall"}
        assert len(store.locations) == 25

    @pytest.mark.asyncio
    async def test_update_missing_location(self, context) -> None:
        result = await execute('mutation { updateLocation(id: "0") { id } }', context)

        assert result.errors[0].message == "Location not found"

    @pytest.mark.asyncio
    async def test_delete_all_locations(self, context) -> None:
        result = await execute("mutation { deleteAllLocations { count } }", context)
        dangling = await execute('{ event(id: "1") { location { id } } }', context)

        assert result.data["deleteAllLocations"] == {"count": 25}
        assert dangling.errors is None
        assert dangling.data["event"]["location"] is None


class TestParticipantMutations:
    @pytest.mark.asyncio
    async def test_create_participant(self, context) -> None:
        result = await execute(
            'mutation { createParticipant(data: { user_id: "1", event_id: "1" }) '
            "{ id user_id event_id } }",
            context,
        )

        assert result.errors is None
        assert result.data["createParticipant"]["user_id"] == "1"

        # Duplicate (user_id, event_id) pairs are allowed
        listed = await execute('{ event(id: "1") { participants { id } } }', context)
        assert len(listed.data["event"]["participants"]) == 2

    @pytest.mark.asyncio
    async def test_update_participant(self, context) -> None:
        result = await execute(
            'mutation { updateParticipant(id: "1", data: { event_id: "7" }) '
            "{ id user_id event_id } }",
            context,
        )

        assert result.data["updateParticipant"] == {"id": "1", "user_id": "1", "event_id": "7"}

    @pytest.mark.asyncio
    async def test_delete_participant(self, context) -> None:
        result = await execute('mutation { deleteParticipant(id: 50) { id } }', context)

        assert result.data["deleteParticipant"] == {"id": "50"}

    @pytest.mark.asyncio
    async def test_delete_all_participants(self, context) -> None:
        result = await execute("mutation { deleteAllParticipants { count } }", context)
        listing = await execute("{ participants { id } }", context)

        assert result.data["deleteAllParticipants"] == {"count": 50}
        assert listing.data["participants"] == []


@pytest.mark.asyncio
async def test_read_only_schema_rejects_mutations(context) -> None:
    read_only = create_schema(mutations_enabled=False)

    result = await read_only.execute("mutation { deleteAllUsers { count } }", context_value=context)

    assert result.errors is not None
    assert "Mutation" not in read_only.as_str()
