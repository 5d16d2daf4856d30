from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import mutations, relations
from ..context import get_store_from_info
from ..types.common import DeleteAllOutput, provided_fields

if TYPE_CHECKING:
    from ..types.event import Event
    from ..types.user import CreateUserInput, UpdateUserInput, User


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User

    store = get_store_from_info(info)
    return [User.from_record(record) for record in store.users]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    from ..types.user import User

    record = get_store_from_info(info).users.find(id)
    return User.from_record(record) if record else None


# Field resolvers
async def resolve_user_events(user: User, info: strawberry.Info) -> list[Event]:
    from ..types.event import Event

    store = get_store_from_info(info)
    return [Event.from_record(record) for record in relations.user_events(store, user.record)]


# Mutation resolvers
async def create_user(info: strawberry.Info, data: CreateUserInput | None) -> User:
    from ..types.user import User

    store = get_store_from_info(info)
    record = mutations.create_record(store.users, provided_fields(data))
    return User.from_record(record)


async def update_user(info: strawberry.Info, id: str, data: UpdateUserInput | None) -> User:
    from ..types.user import User

    store = get_store_from_info(info)
    record = mutations.update_record(store.users, id, provided_fields(data))
    return User.from_record(record)


async def delete_user(info: strawberry.Info, id: str) -> User:
    from ..types.user import User

    store = get_store_from_info(info)
    return User.from_record(mutations.delete_record(store.users, id))


async def delete_all_users(info: strawberry.Info) -> DeleteAllOutput:
    store = get_store_from_info(info)
    return DeleteAllOutput(count=mutations.delete_all_records(store.users))
