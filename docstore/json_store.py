from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import MalformedDocumentError


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None for empty (or whitespace-only) files. Missing files and other
    OS-level failures propagate as OSError; undecodable content raises
    MalformedDocumentError.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"invalid UTF-8: {e}", path=path) from e
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"invalid JSON: {e}", path=path) from e


def atomic_write_json(path: Path, payload: Any, *, indent: int | None = 2) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    Key order is preserved so collections keep the order they were created in.
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=indent, ensure_ascii=False)
            f.write("\n")
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
