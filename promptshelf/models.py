"""Core domain models.

All storage functions return these types. Pydantic is used for validation
and serialisation at every data boundary (snapshot files and API responses).
"""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_THEME_COLOR = "#5a5ce6"

MaterialType = Literal["link", "video"]


def new_id() -> str:
    return uuid.uuid4().hex


class User(BaseModel):
    """Public view of an account. The stored record also holds a password hash."""

    username: str


class Entry(BaseModel):
    """A saved prompt: image + text + tags, filed under one category."""

    id: str = Field(default_factory=new_id)
    owner: str
    category: str
    prompt_text: str
    image: str  # data-URI, never decoded
    tags: list[str] = Field(default_factory=list)
    done: bool = False


class Scene(BaseModel):
    """One step of a story timeline. Identity is its position in the list."""

    model_config = ConfigDict(validate_assignment=True)

    image: str
    prompt_text: str = ""
    video_title: str = ""
    duration: int | None = None  # seconds; positive when set
    animation_prompt: str = ""
    tags: list[str] = Field(default_factory=list)
    done: bool = False


class StoryDocument(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    scenario: str = ""
    theme_color: str = DEFAULT_THEME_COLOR
    scenes: list[Scene] = Field(default_factory=list)


class TimelineSegment(BaseModel):
    """Proportional slot of a scene on the timeline scale."""

    index: int
    duration: int | None
    weight: int  # duration, or 1 when unset
    share: float  # weight / total weight


class Material(BaseModel):
    """A bookmarked reference link or video."""

    id: str = Field(default_factory=new_id)
    owner: str
    title: str
    type: MaterialType = "link"
    url: str
    tags: list[str] = Field(default_factory=list)
