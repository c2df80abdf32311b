from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for document store errors."""

    code = "store_error"

    def __init__(self, message: str, *, path: Path | str | None = None):
        super().__init__(message if path is None else f"{path}: {message}")
        self.message = message
        self.path = Path(path) if path is not None else None


class MalformedDocumentError(StoreError):
    code = "malformed_document"


class DuplicateCollectionError(StoreError):
    code = "duplicate_collection"

    def __init__(self, name: str, *, path: Path | str | None = None):
        super().__init__(f"collection {name!r} already exists", path=path)
        self.name = name
