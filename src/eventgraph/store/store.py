"""
In-memory entity store.

One ``Collection`` per entity kind, each an ordered list scanned linearly.
An ``EntityStore`` is created per application instance (and per test), so
there is no module-level shared state.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from .ids import ids_match
from .records import Event, Location, Participant, Record, User

R = TypeVar("R", bound=Record)


class Collection(Generic[R]):
    """Ordered records of a single entity kind."""

    def __init__(self, record_type: type[R], records: Iterable[R] = ()):
        self.record_type = record_type
        self._records: list[R] = list(records)

    @property
    def kind(self) -> str:
        return self.record_type.KIND

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def all(self) -> list[R]:
        return list(self._records)

    def find(self, record_id: Any) -> R | None:
        """Return the first record whose id loosely equals ``record_id``."""
        for record in self._records:
            if ids_match(record.id, record_id):
                return record
        return None

    def filter(self, predicate: Callable[[R], bool]) -> list[R]:
        return [record for record in self._records if predicate(record)]

    def index_of(self, record_id: Any) -> int:
        for index, record in enumerate(self._records):
            if ids_match(record.id, record_id):
                return index
        return -1

    def get(self, index: int) -> R:
        return self._records[index]

    def append(self, record: R) -> R:
        self._records.append(record)
        return record

    def pop(self, index: int) -> R:
        return self._records.pop(index)

    def clear(self) -> int:
        """Remove every record and return how many there were."""
        count = len(self._records)
        self._records.clear()
        return count


class EntityStore:
    """The four entity collections backing the API."""

    def __init__(
        self,
        users: Iterable[User] = (),
        events: Iterable[Event] = (),
        locations: Iterable[Location] = (),
        participants: Iterable[Participant] = (),
    ):
        self.users: Collection[User] = Collection(User, users)
        self.events: Collection[Event] = Collection(Event, events)
        self.locations: Collection[Location] = Collection(Location, locations)
        self.participants: Collection[Participant] = Collection(Participant, participants)

    @classmethod
    def from_seed(cls, data: Mapping[str, Iterable[Mapping[str, Any]]]) -> "EntityStore":
        """Build a store from plain mappings keyed by collection name."""
        return cls(
            users=[User.from_mapping(item) for item in data.get("users", ())],
            events=[Event.from_mapping(item) for item in data.get("events", ())],
            locations=[Location.from_mapping(item) for item in data.get("locations", ())],
            participants=[
                Participant.from_mapping(item) for item in data.get("participants", ())
            ],
        )

    def collections(self) -> dict[str, Collection[Any]]:
        return {
            "users": self.users,
            "events": self.events,
            "locations": self.locations,
            "participants": self.participants,
        }

    def counts(self) -> dict[str, int]:
        return {name: len(collection) for name, collection in self.collections().items()}
