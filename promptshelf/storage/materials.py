"""Reference materials (bookmarked links and videos) per owner."""

import logging

from promptshelf.models import Material
from promptshelf.normalize import matches_term, parse_tags

from .core import load_snapshot, save_snapshot, storage_lock, user_scopes
from .errors import MissingField, NotFound

logger = logging.getLogger(__name__)

MATERIAL_TYPES = ("link", "video")


def list_materials(owner: str) -> list[Material]:
    return [Material.model_validate(m) for m in load_snapshot(owner)["materials"]]


def create_material(
    owner: str,
    title: str,
    type: str = "link",
    url: str = "",
    tags: str | list[str] | None = None,
) -> Material:
    """Add a bookmark. Unknown types are stored as "link"."""
    for name, value in (("owner", owner), ("title", title), ("url", url)):
        if not value:
            raise MissingField(name)
    material = Material(
        owner=owner,
        title=title,
        type=type if type in MATERIAL_TYPES else "link",
        url=url,
        tags=parse_tags(tags),
    )
    with storage_lock():
        snapshot = load_snapshot(owner)
        snapshot["materials"].append(material.model_dump())
        save_snapshot(owner, snapshot)
    return material


def delete_material(material_id: str) -> None:
    with storage_lock():
        for owner in user_scopes():
            snapshot = load_snapshot(owner)
            for i, raw in enumerate(snapshot["materials"]):
                if raw["id"] == material_id:
                    snapshot["materials"].pop(i)
                    save_snapshot(owner, snapshot)
                    logger.info(f"Deleted material {material_id} of {owner!r}")
                    return
    raise NotFound(f"Material '{material_id}' not found")


def search_materials(owner: str, term: str = "") -> list[Material]:
    """Case-insensitive substring search over title, type, and tags."""
    results = list_materials(owner)
    term = (term or "").strip()
    if term:
        results = [m for m in results if matches_term(term, m.title, m.type, tags=m.tags)]
    return results
