from __future__ import annotations

import json

import pytest

from docstore.disk_store import DiskJsonDocumentStore
from docstore.errors import MalformedDocumentError
from docstore.locks import GLOBAL_PATH_LOCKS


def test_ensure_creates_file_and_parents(db_path):
    store = DiskJsonDocumentStore(db_path)
    assert not db_path.parent.exists()

    store.ensure()

    assert db_path.is_file()
    assert json.loads(db_path.read_text(encoding="utf-8")) == {}


def test_ensure_seeds_empty_and_blank_files(tmp_path):
    for content in ("", "  \n"):
        path = tmp_path / "blank.json"
        path.write_text(content, encoding="utf-8")
        DiskJsonDocumentStore(path).ensure()
        assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_ensure_leaves_existing_document_untouched(tmp_path):
    path = tmp_path / "db.json"
    original = '{"users": [{"name": "John", "id": "a"}]}'
    path.write_text(original, encoding="utf-8")

    DiskJsonDocumentStore(path).ensure()

    assert path.read_text(encoding="utf-8") == original


def test_ensure_on_directory_raises_oserror(tmp_path):
    with pytest.raises(IsADirectoryError):
        DiskJsonDocumentStore(tmp_path).ensure()


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(MalformedDocumentError) as exc:
        DiskJsonDocumentStore(path).load()
    assert exc.value.path == path
    assert exc.value.code == "malformed_document"


def test_load_invalid_utf8_raises(tmp_path):
    path = tmp_path / "db.json"
    path.write_bytes(b'{"users": [{"id": "1", "n": "\xff\xfe"}]}')

    with pytest.raises(MalformedDocumentError, match="invalid UTF-8"):
        DiskJsonDocumentStore(path).load()
    with pytest.raises(MalformedDocumentError):
        DiskJsonDocumentStore(path).ensure()


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        '"text"',
        '{"users": {"a": 1}}',
        '{"users": [1, 2]}',
        '{"users": [{"name": "no id"}]}',
        '{"users": [{"id": 7}]}',
    ],
)
def test_load_wrong_shape_raises(tmp_path, content):
    path = tmp_path / "db.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(MalformedDocumentError):
        DiskJsonDocumentStore(path).load()


def test_ensure_does_not_repair_malformed_file(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(MalformedDocumentError):
        DiskJsonDocumentStore(path).ensure()
    assert path.read_text(encoding="utf-8") == "{broken"


def test_load_missing_file_raises_oserror(tmp_path):
    with pytest.raises(FileNotFoundError):
        DiskJsonDocumentStore(tmp_path / "missing.json").load()


def test_save_roundtrip_preserves_document(db_path):
    store = DiskJsonDocumentStore(db_path)
    store.ensure()
    doc = {
        "users": [{"name": "Zoë", "tags": ["a", "b"], "id": "1"}],
        "orders": [],
        "audit": [{"id": "2", "nested": {"n": 1.5, "ok": True, "none": None}}],
    }

    store.save(doc)
    reloaded = DiskJsonDocumentStore(db_path).load()

    assert reloaded == doc
    assert list(reloaded) == ["users", "orders", "audit"]
    assert not (db_path.parent / "db.json.tmp").exists()


def test_compact_indent_writes_single_line(db_path):
    store = DiskJsonDocumentStore(db_path, indent=None)
    store.ensure()
    store.save({"users": [{"id": "1"}]})

    assert db_path.read_text(encoding="utf-8") == '{"users": [{"id": "1"}]}\n'


def test_lock_is_shared_per_path(tmp_path):
    a = DiskJsonDocumentStore(tmp_path / "db.json")
    b = DiskJsonDocumentStore(tmp_path / "sub" / ".." / "db.json")
    c = DiskJsonDocumentStore(tmp_path / "other.json")

    assert a.lock is b.lock
    assert a.lock is not c.lock
    assert len(GLOBAL_PATH_LOCKS) >= 2


def test_relative_path_is_anchored_at_construction(tmp_path, monkeypatch):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    monkeypatch.chdir(first)

    store = DiskJsonDocumentStore("db.json")
    lock = store.lock
    store.ensure()
    monkeypatch.chdir(second)
    store.save({"users": [{"id": "1"}]})

    assert store.path.resolve() == (first / "db.json").resolve()
    assert store.lock is lock
    assert store.lock is DiskJsonDocumentStore(first / "db.json").lock
    assert store.load() == {"users": [{"id": "1"}]}
    assert not (second / "db.json").exists()
