"""Storage initialization, snapshot load/save, and slug utilities."""

import hashlib
import json
import os
import re
import threading
import unicodedata
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from promptshelf.models import DEFAULT_THEME_COLOR

GLOBAL_SCOPE = "global"

DEFAULT_CATEGORIES = ["MidJourney", "Sora", "Leonardo AI", "VEO3", "Other"]

_data_dir: Path | None = None
_lock = threading.RLock()


def slugify(title: str) -> str:
    """Convert a title to a filesystem-safe slug.

    "Leonardo AI" → "leonardo-ai"
    """
    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"['\"]", "", text)  # strip apostrophes/quotes before hyphenation
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = text.strip("-")
    return text or "untitled"


def init_storage(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    users_dir().mkdir(exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def users_dir() -> Path:
    return data_dir() / "users"


@contextmanager
def storage_lock() -> Iterator[None]:
    """Serialize a read-modify-write across snapshots (re-entrant)."""
    with _lock:
        yield


def user_key(username: str) -> str:
    """File stem for a user's snapshot.

    Slugs fold case, so a digest of the exact username keeps "Ann" and "ann"
    in separate files.
    """
    digest = hashlib.sha1(username.encode("utf-8")).hexdigest()[:8]
    return f"{slugify(username)}-{digest}"


def _snapshot_path(scope: str) -> Path:
    if scope == GLOBAL_SCOPE:
        return data_dir() / "global.json"
    return users_dir() / f"{user_key(scope)}.json"


def _default_snapshot(scope: str) -> dict[str, Any]:
    if scope == GLOBAL_SCOPE:
        return {"users": [], "categories": list(DEFAULT_CATEGORIES)}
    return {
        "username": scope,
        "entries": [],
        "story": {"scenario": "", "theme_color": DEFAULT_THEME_COLOR, "scenes": []},
        "materials": [],
    }


def load_snapshot(scope: str) -> dict[str, Any]:
    """Read the document for a scope ("global" or a username).

    Missing documents and missing keys come back filled with defaults.
    """
    snapshot = _default_snapshot(scope)
    path = _snapshot_path(scope)
    if path.is_file():
        snapshot.update(json.loads(path.read_text()))
    return snapshot


def save_snapshot(scope: str, snapshot: dict[str, Any]) -> None:
    """Write the whole document for a scope.

    The data goes to a temp file first, so a failed write never leaves a
    truncated snapshot behind. OSError propagates to the caller.
    """
    path = _snapshot_path(scope)
    tmp = path.with_suffix(".json.tmp")
    tmp.write_text(json.dumps(snapshot, indent=2))
    os.replace(tmp, path)


def user_scopes() -> list[str]:
    """Usernames of every stored per-user snapshot, in file order."""
    scopes = []
    for path in sorted(users_dir().glob("*.json")):
        stored = json.loads(path.read_text())
        scopes.append(stored["username"])
    return scopes
