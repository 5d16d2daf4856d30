"""
Resolver context helpers
"""

from typing import Any

import strawberry

from ..store import EntityStore, ParticipantMatch


def build_context(
    store: EntityStore,
    participant_match: ParticipantMatch = ParticipantMatch.USER,
    **extra: Any,
) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {"store": store, "participant_match": participant_match, **extra}


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("No entity store in GraphQL context")
    return store


def get_participant_match_from_info(info: strawberry.Info) -> ParticipantMatch:
    return ParticipantMatch(info.context.get("participant_match", ParticipantMatch.USER))
