from __future__ import annotations

import copy
import logging
import uuid
from pathlib import Path
from typing import Any, Mapping

from .disk_store import DiskJsonDocumentStore
from .errors import DuplicateCollectionError
from .interfaces import CollectionStore, Document, Record
from .settings import Settings

logger = logging.getLogger(__name__)


def _check_collection_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("collection name must be a non-empty string")


class Database(CollectionStore):
    """
    Collections of records kept in one JSON file.

    Every operation re-reads the file, computes the new document in memory and
    rewrites the whole file. Operations against the same path are serialized
    by an in-process lock; separate processes are not coordinated.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        indent: int | None = 2,
        strict_collections: bool = False,
    ) -> None:
        self._store = DiskJsonDocumentStore(path, indent=indent)
        self._strict_collections = strict_collections

    @classmethod
    def open(cls, path: Path | str, **kwargs: Any) -> "Database":
        db = cls(path, **kwargs)
        db.setup()
        return db

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls.open(
            settings.db_path,
            indent=settings.json_indent,
            strict_collections=settings.strict_collections,
        )

    @property
    def path(self) -> Path:
        return self._store.path

    def setup(self) -> None:
        """Ensure the backing file exists; an empty file is seeded with {}."""
        self._store.ensure()
        logger.debug("database ready at %s", self.path)

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------
    def create_collection(self, name: str) -> None:
        """
        Add an empty collection.

        An existing name is skipped (logged) unless the database was opened
        with strict_collections=True, in which case DuplicateCollectionError
        is raised.
        """
        _check_collection_name(name)
        with self._store.lock:
            doc = self._store.load()
            if name in doc:
                if self._strict_collections:
                    raise DuplicateCollectionError(name, path=self.path)
                logger.info("Collection %r already exists, skipping", name)
                return
            doc[name] = []
            self._store.save(doc)

    def collections(self) -> list[str]:
        return list(self._store.load().keys())

    def has_collection(self, name: str) -> bool:
        return name in self._store.load()

    def load_document(self) -> Document:
        return self._store.load()

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------
    def add_one(self, collection: str, payload: Mapping[str, Any]) -> Record:
        """
        Append a record and return it with its new id.

        A collection that does not exist yet is created by the first insert.
        """
        _check_collection_name(collection)
        if "id" in payload:
            raise ValueError("payload must not contain 'id'; ids are assigned by the store")
        item: Record = {**payload, "id": str(uuid.uuid4())}
        with self._store.lock:
            doc = self._store.load()
            doc[collection] = [*doc.get(collection, []), item]
            self._store.save(doc)
        return copy.deepcopy(item)

    def get_all(self, collection: str) -> list[Record]:
        # load() returns freshly parsed objects, so this is already a snapshot.
        return list(self._store.load().get(collection, []))

    def get_one(self, collection: str, record_id: str) -> Record | None:
        for item in self.get_all(collection):
            if item.get("id") == record_id:
                return item
        return None

    def remove_one(self, collection: str, record_id: str) -> bool:
        """Delete by id. A missing id is not an error; returns whether anything was removed."""
        with self._store.lock:
            if self.get_one(collection, record_id) is None:
                return False
            doc = self._store.load()
            doc[collection] = [item for item in doc.get(collection, []) if item.get("id") != record_id]
            self._store.save(doc)
        return True

    def clear_db(self) -> None:
        with self._store.lock:
            self._store.save({})
        logger.debug("cleared %s", self.path)
