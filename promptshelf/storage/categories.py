"""Shared category list with cascading rename/delete.

The list is one process-wide taxonomy stored in the global snapshot. It is
never allowed to become empty. Renames rewrite matching entries of every
user; deletions move them to the fallback category.
"""

import logging

from .core import GLOBAL_SCOPE, load_snapshot, save_snapshot, storage_lock
from .entries import reassign_category
from .errors import (
    DuplicateCategory,
    InvalidArgument,
    LastCategoryError,
    MissingField,
    NotFound,
)

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "Other"


def list_categories() -> list[str]:
    return list(load_snapshot(GLOBAL_SCOPE)["categories"])


def add_category(name: str) -> list[str]:
    if not name:
        raise MissingField("name")
    with storage_lock():
        snapshot = load_snapshot(GLOBAL_SCOPE)
        if name in snapshot["categories"]:
            raise DuplicateCategory(f"Category '{name}' already exists")
        snapshot["categories"].append(name)
        save_snapshot(GLOBAL_SCOPE, snapshot)
    logger.info(f"Added category {name!r}")
    return snapshot["categories"]


def rename_category(old_name: str, new_name: str) -> list[str]:
    """Rename in place (position kept) and move entries along with it."""
    with storage_lock():
        snapshot = load_snapshot(GLOBAL_SCOPE)
        categories = snapshot["categories"]
        if old_name not in categories:
            raise NotFound(f"Category '{old_name}' not found")
        if not new_name:
            raise InvalidArgument("New category name must not be empty")
        if new_name == old_name:
            return categories
        if new_name in categories:
            raise DuplicateCategory(f"Category '{new_name}' already exists")
        categories[categories.index(old_name)] = new_name
        save_snapshot(GLOBAL_SCOPE, snapshot)
        moved = reassign_category(old_name, new_name)
    logger.info(f"Renamed category {old_name!r} → {new_name!r} ({moved} entries updated)")
    return categories


def remove_category(name: str) -> list[str]:
    """Delete a category and move its entries to the fallback.

    The fallback is "Other" while it exists, else the first remaining
    category, so entries never point at a deleted name.
    """
    with storage_lock():
        snapshot = load_snapshot(GLOBAL_SCOPE)
        categories = snapshot["categories"]
        if name not in categories:
            raise NotFound(f"Category '{name}' not found")
        if len(categories) == 1:
            raise LastCategoryError("Cannot delete the last category")
        categories.remove(name)
        save_snapshot(GLOBAL_SCOPE, snapshot)
        target = FALLBACK_CATEGORY if FALLBACK_CATEGORY in categories else categories[0]
        moved = reassign_category(name, target)
    logger.info(f"Removed category {name!r} ({moved} entries moved to {target!r})")
    return categories
