"""Input normalization shared by entries, scenes, and materials."""

import re
from typing import Any


def parse_tags(value: str | list[str] | None) -> list[str]:
    """Normalize tags: strip, drop one leading '#', lowercase, dedupe.

    Accepts a list or a comma-separated string ("art, #Sky" → ["art", "sky"]).
    """
    if not value:
        return []
    items = value.split(",") if isinstance(value, str) else value
    tags: list[str] = []
    for item in items:
        tag = str(item).strip()
        if tag.startswith("#"):
            tag = tag[1:]
        tag = tag.strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def parse_duration(value: Any) -> int | None:
    """Parse a scene duration in seconds. Invalid or non-positive → None.

    Strings are read like a form field: leading digits only ("12s" → 12).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        seconds = int(value)
    elif isinstance(value, str):
        match = re.match(r"\s*\+?(\d+)", value)
        if not match:
            return None
        seconds = int(match.group(1))
    else:
        return None
    return seconds if seconds > 0 else None


def matches_term(term: str, *fields: str, tags: list[str] = ()) -> bool:
    """Case-insensitive substring match against any field or tag."""
    needle = term.lower()
    if any(needle in (f or "").lower() for f in fields):
        return True
    return any(needle in t.lower() for t in tags)
