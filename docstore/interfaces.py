from __future__ import annotations

from typing import Any, Mapping, Protocol

Record = dict[str, Any]
Document = dict[str, list[Record]]


class DocumentStore(Protocol):
    """
    A single JSON document persisted as a whole.
    """

    def ensure(self) -> None:
        """Make sure the backing document exists, creating an empty one if needed."""
        ...

    def load(self) -> Document:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: Document) -> None:
        """Persist the full document atomically."""
        ...


class CollectionStore(Protocol):
    def create_collection(self, name: str) -> None: ...

    def add_one(self, collection: str, payload: Mapping[str, Any]) -> Record: ...

    def get_all(self, collection: str) -> list[Record]: ...

    def get_one(self, collection: str, record_id: str) -> Record | None: ...

    def remove_one(self, collection: str, record_id: str) -> bool: ...

    def clear_db(self) -> None: ...
