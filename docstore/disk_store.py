from __future__ import annotations

import errno
import logging
import threading
from pathlib import Path

from .interfaces import Document, DocumentStore
from .json_store import atomic_write_json, read_json
from .locks import GLOBAL_PATH_LOCKS
from .models import validate_document

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - `ensure()` creates the file (and parents) and seeds an empty file with {}.
    - `load()` raises MalformedDocumentError on invalid content, OSError on I/O.
    - Writes atomically.
    """

    def __init__(self, path: Path | str, *, indent: int | None = 2):
        # Anchored once so a later chdir cannot move the file or its lock.
        self._path = Path(path).absolute()
        self._lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def ensure(self) -> None:
        with self.lock:
            if self._path.is_dir():
                raise IsADirectoryError(errno.EISDIR, "path is a directory", str(self._path))
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
            if read_json(self._path) is None:
                logger.debug("initializing empty document at %s", self._path)
                self.save({})
            else:
                # Validate existing content up front; never overwrite it.
                self.load()

    def load(self) -> Document:
        with self.lock:
            raw = read_json(self._path)
            if raw is None:
                return {}
            return validate_document(raw, path=self._path)

    def save(self, doc: Document) -> None:
        with self.lock:
            atomic_write_json(self._path, doc, indent=self._indent)
            logger.debug("wrote %d collection(s) to %s", len(doc), self._path)
