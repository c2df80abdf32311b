from __future__ import annotations

from .database import Database
from .disk_store import DiskJsonDocumentStore
from .errors import DuplicateCollectionError, MalformedDocumentError, StoreError
from .repositories import AsyncCollectionStore, AsyncDatabase
from .settings import Settings, get_settings

__all__ = [
    "Database",
    "DiskJsonDocumentStore",
    "AsyncCollectionStore",
    "AsyncDatabase",
    "StoreError",
    "MalformedDocumentError",
    "DuplicateCollectionError",
    "Settings",
    "get_settings",
]
