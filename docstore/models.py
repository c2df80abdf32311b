from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, StrictStr, ValidationError

from .errors import MalformedDocumentError


class RecordModel(BaseModel):
    """A stored record: arbitrary fields plus the store-assigned string id."""

    model_config = ConfigDict(extra="allow")

    id: StrictStr


class DocumentModel(RootModel[dict[str, list[RecordModel]]]):
    """
    Mirrors the on-disk schema:
      { "<collection>": [ { "id": "<uuid>", ...fields }, ... ], ... }
    """


def validate_document(raw: Any, *, path: Path | None = None) -> dict[str, list[dict[str, Any]]]:
    """
    Check that `raw` has the Document shape and return it unchanged.

    Records are returned as the raw dicts (not re-dumped models) so that field
    order on disk survives a load/save cycle.
    """
    if not isinstance(raw, dict):
        raise MalformedDocumentError(
            f"top-level JSON value must be an object, got {type(raw).__name__}", path=path
        )
    try:
        DocumentModel.model_validate(raw)
    except ValidationError as e:
        raise MalformedDocumentError(f"not a document: {e}", path=path) from e
    return raw
