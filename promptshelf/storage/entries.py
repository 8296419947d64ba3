"""Prompt entries, partitioned by owner inside per-user snapshots."""

import logging
from typing import Any

from promptshelf.models import Entry
from promptshelf.normalize import matches_term, parse_tags

from .core import load_snapshot, save_snapshot, storage_lock, user_scopes
from .errors import MissingField, NotFound, OwnerMismatch

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def list_entries(owner: str) -> list[Entry]:
    """All entries for owner in insertion order."""
    return [Entry.model_validate(e) for e in load_snapshot(owner)["entries"]]


def get_entry(entry_id: str) -> Entry | None:
    for owner in user_scopes():
        for raw in load_snapshot(owner)["entries"]:
            if raw["id"] == entry_id:
                return Entry.model_validate(raw)
    return None


def _locate(entry_id: str) -> tuple[str, dict[str, Any], int]:
    """Find an entry across users. Returns (owner, snapshot, index)."""
    for owner in user_scopes():
        snapshot = load_snapshot(owner)
        for i, raw in enumerate(snapshot["entries"]):
            if raw["id"] == entry_id:
                return owner, snapshot, i
    raise NotFound(f"Entry '{entry_id}' not found")


def create_entry(
    owner: str,
    category: str,
    prompt_text: str,
    image: str,
    tags: str | list[str] | None = None,
    done: bool = False,
) -> Entry:
    for name, value in (
        ("owner", owner),
        ("category", category),
        ("prompt_text", prompt_text),
        ("image", image),
    ):
        if not value:
            raise MissingField(name)
    entry = Entry(
        owner=owner,
        category=category,
        prompt_text=prompt_text,
        image=image,
        tags=parse_tags(tags),
        done=done if isinstance(done, bool) else False,
    )
    with storage_lock():
        snapshot = load_snapshot(owner)
        snapshot["entries"].append(entry.model_dump())
        save_snapshot(owner, snapshot)
    return entry


def update_entry(entry_id: str, fields: dict[str, Any]) -> Entry:
    """Apply a partial update.

    Text fields change only when given a non-empty value; tags when given a
    list (an empty list clears them); done when given a bool. A non-empty
    ``owner`` that differs from the stored owner is refused untouched.
    """
    with storage_lock():
        owner, snapshot, index = _locate(entry_id)
        raw = snapshot["entries"][index]
        claimed = fields.get("owner")
        if claimed and claimed != raw["owner"]:
            raise OwnerMismatch(f"Entry '{entry_id}' belongs to another user")
        for key in ("category", "prompt_text", "image"):
            value = fields.get(key)
            if isinstance(value, str) and value:
                raw[key] = value
        if isinstance(fields.get("tags"), list):
            raw["tags"] = parse_tags(fields["tags"])
        if isinstance(fields.get("done"), bool):
            raw["done"] = fields["done"]
        save_snapshot(owner, snapshot)
    return Entry.model_validate(raw)


def set_entry_done(entry_id: str, done: bool) -> Entry:
    return update_entry(entry_id, {"done": bool(done)})


def delete_entry(entry_id: str) -> None:
    with storage_lock():
        owner, snapshot, index = _locate(entry_id)
        snapshot["entries"].pop(index)
        save_snapshot(owner, snapshot)
    logger.info(f"Deleted entry {entry_id} of {owner!r}")


def search_entries(owner: str, category: str = ALL_CATEGORIES, term: str = "") -> list[Entry]:
    """Filter owner's entries by category (unless "All") and search term.

    The term matches, case-insensitively, a substring of the prompt text or
    of any tag.
    """
    results = list_entries(owner)
    if category and category != ALL_CATEGORIES:
        results = [e for e in results if e.category == category]
    term = (term or "").strip()
    if term:
        results = [e for e in results if matches_term(term, e.prompt_text, tags=e.tags)]
    return results


def reassign_category(old: str, new: str) -> int:
    """Rewrite every entry in category ``old`` to ``new``, across all users.

    Returns how many entries changed. Callers hold the storage lock.
    """
    changed = 0
    for owner in user_scopes():
        snapshot = load_snapshot(owner)
        hits = [e for e in snapshot["entries"] if e["category"] == old]
        if not hits:
            continue
        for raw in hits:
            raw["category"] = new
        save_snapshot(owner, snapshot)
        changed += len(hits)
    return changed
