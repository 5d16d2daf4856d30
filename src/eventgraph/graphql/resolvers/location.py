from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import mutations
from ..context import get_store_from_info
from ..types.common import DeleteAllOutput, provided_fields

if TYPE_CHECKING:
    from ..types.location import CreateLocationInput, Location, UpdateLocationInput


async def resolve_locations(info: strawberry.Info) -> list[Location]:
    from ..types.location import Location

    store = get_store_from_info(info)
    return [Location.from_record(record) for record in store.locations]


async def resolve_location_by_id(info: strawberry.Info, id: str) -> Location | None:
    from ..types.location import Location

    record = get_store_from_info(info).locations.find(id)
    return Location.from_record(record) if record else None


async def create_location(info: strawberry.Info, data: CreateLocationInput | None) -> Location:
    from ..types.location import Location

    store = get_store_from_info(info)
    record = mutations.create_record(store.locations, provided_fields(data))
    return Location.from_record(record)


async def update_location(
    info: strawberry.Info, id: str, data: UpdateLocationInput | None
) -> Location:
    from ..types.location import Location

    store = get_store_from_info(info)
    record = mutations.update_record(store.locations, id, provided_fields(data))
    return Location.from_record(record)


async def delete_location(info: strawberry.Info, id: str) -> Location:
    from ..types.location import Location

    store = get_store_from_info(info)
    return Location.from_record(mutations.delete_record(store.locations, id))


async def delete_all_locations(info: strawberry.Info) -> DeleteAllOutput:
    store = get_store_from_info(info)
    return DeleteAllOutput(count=mutations.delete_all_records(store.locations))
