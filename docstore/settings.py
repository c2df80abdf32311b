from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_indent(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw or raw == "0":
        # compact output
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Storage
    db_path: Path
    json_indent: int | None

    # Behavior of create_collection on an existing name
    strict_collections: bool

    # Logging (demo / host programs)
    log_level: str


def get_settings(env_file: str | os.PathLike[str] | None = ".env") -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    db_path = Path(os.getenv("DOCSTORE_PATH", "./storage/db.json")).expanduser()
    json_indent = _env_indent("DOCSTORE_JSON_INDENT", 2)
    strict_collections = _env_bool("DOCSTORE_STRICT_COLLECTIONS", False)
    log_level = os.getenv("DOCSTORE_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        db_path=db_path,
        json_indent=json_indent,
        strict_collections=strict_collections,
        log_level=log_level,
    )
