from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import mutations
from ..context import get_store_from_info
from ..types.common import DeleteAllOutput, provided_fields

if TYPE_CHECKING:
    from ..types.participant import (
        CreateParticipantInput,
        Participant,
        UpdateParticipantInput,
    )


async def resolve_participants(info: strawberry.Info) -> list[Participant]:
    from ..types.participant import Participant

    store = get_store_from_info(info)
    return [Participant.from_record(record) for record in store.participants]


async def resolve_participant_by_id(info: strawberry.Info, id: str) -> Participant | None:
    from ..types.participant import Participant

    record = get_store_from_info(info).participants.find(id)
    return Participant.from_record(record) if record else None


async def create_participant(
    info: strawberry.Info, data: CreateParticipantInput | None
) -> Participant:
    from ..types.participant import Participant

    store = get_store_from_info(info)
    record = mutations.create_record(store.participants, provided_fields(data))
    return Participant.from_record(record)


async def update_participant(
    info: strawberry.Info, id: str, data: UpdateParticipantInput | None
) -> Participant:
    from ..types.participant import Participant

    store = get_store_from_info(info)
    record = mutations.update_record(store.participants, id, provided_fields(data))
    return Participant.from_record(record)


async def delete_participant(info: strawberry.Info, id: str) -> Participant:
    from ..types.participant import Participant

    store = get_store_from_info(info)
    return Participant.from_record(mutations.delete_record(store.participants, id))


async def delete_all_participants(info: strawberry.Info) -> DeleteAllOutput:
    store = get_store_from_info(info)
    return DeleteAllOutput(count=mutations.delete_all_records(store.participants))
