from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import docstore...` or `import demo`
# under pytest import modes that don't automatically prepend the rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """
    A backing file path inside a not-yet-existing directory, so setup has to create it.
    """
    return tmp_path / "storage" / "db.json"


@pytest.fixture
def db(db_path: Path):
    from docstore.database import Database

    return Database.open(db_path)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "DOCSTORE_PATH",
        "DOCSTORE_JSON_INDENT",
        "DOCSTORE_STRICT_COLLECTIONS",
        "DOCSTORE_LOG_LEVEL",
    ):
        # setenv first so teardown always restores the original state, even for
        # values load_dotenv writes during the test.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
