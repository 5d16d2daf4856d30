"""
Seed data loading.

The bundled ``seed.json`` carries the sample users, events, locations and
participants the API starts with. A different file can be supplied through
``EVENTGRAPH_SEED_PATH``.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from ..logging import get_logger
from .errors import SeedDataError
from .store import EntityStore

logger = get_logger(__name__)

COLLECTION_NAMES = ("users", "events", "locations", "participants")


def load_seed(path: str | Path | None = None) -> dict[str, list[dict[str, Any]]]:
    """
    Read seed data from ``path`` or from the bundled file.

    Args:
        path: Optional JSON file with any of the keys ``users``, ``events``,
            ``locations`` and ``participants``. Missing keys load as empty.

    Returns:
        Mapping of collection name to a list of record mappings

    Raises:
        SeedDataError: If the file cannot be read or parsed, or is not an object
            of lists
    """
    try:
        if path is None:
            raw = resources.files(__package__).joinpath("seed.json").read_text(encoding="utf-8")
            source = "bundled"
        else:
            raw = Path(path).read_text(encoding="utf-8")
            source = str(path)
        data = json.loads(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Could not load seed data: {e}") from e

    if not isinstance(data, dict):
        raise SeedDataError("Seed data must be a JSON object keyed by collection name")

    seed: dict[str, list[dict[str, Any]]] = {}
    for name in COLLECTION_NAMES:
        items = data.get(name, [])
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise SeedDataError(f"Seed collection '{name}' must be a list of objects")
        seed[name] = items

    logger.debug(
        "Seed data loaded", source=source, **{name: len(items) for name, items in seed.items()}
    )
    return seed


def load_default_store(path: str | Path | None = None) -> EntityStore:
    """Create a fresh store populated from seed data."""
    seed = load_seed(path)
    try:
        return EntityStore.from_seed(seed)
    except (KeyError, TypeError) as e:
        raise SeedDataError(f"Invalid seed record: {e}") from e
