from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Mapping, Protocol

from .database import Database
from .interfaces import Document, Record


class AsyncCollectionStore(Protocol):
    async def setup(self) -> None: ...
    async def create_collection(self, name: str) -> None: ...

    async def add_one(self, collection: str, payload: Mapping[str, Any]) -> Record: ...
    async def get_all(self, collection: str) -> list[Record]: ...
    async def get_one(self, collection: str, record_id: str) -> Record | None: ...
    async def remove_one(self, collection: str, record_id: str) -> bool: ...

    async def clear_db(self) -> None: ...


class AsyncDatabase(AsyncCollectionStore):
    """
    Async wrapper around the file-backed Database.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Concurrent tasks are safe within one process: each call runs its whole
    read-modify-write cycle under the per-path lock held by Database.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @classmethod
    def for_path(cls, path: Path | str, **kwargs: Any) -> "AsyncDatabase":
        return cls(Database(path, **kwargs))

    @property
    def path(self) -> Path:
        return self._db.path

    async def setup(self) -> None:
        await asyncio.to_thread(self._db.setup)

    async def create_collection(self, name: str) -> None:
        await asyncio.to_thread(self._db.create_collection, name)

    async def collections(self) -> list[str]:
        return await asyncio.to_thread(self._db.collections)

    async def load_document(self) -> Document:
        return await asyncio.to_thread(self._db.load_document)

    async def add_one(self, collection: str, payload: Mapping[str, Any]) -> Record:
        return await asyncio.to_thread(self._db.add_one, collection, payload)

    async def get_all(self, collection: str) -> list[Record]:
        return await asyncio.to_thread(self._db.get_all, collection)

    async def get_one(self, collection: str, record_id: str) -> Record | None:
        return await asyncio.to_thread(self._db.get_one, collection, record_id)

    async def remove_one(self, collection: str, record_id: str) -> bool:
        return await asyncio.to_thread(self._db.remove_one, collection, record_id)

    async def clear_db(self) -> None:
        await asyncio.to_thread(self._db.clear_db)
