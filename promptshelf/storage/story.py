"""Per-user story document: scenario, theme color, and an ordered scene list.

The document is read and written whole. Scenes have no ids; a scene is
addressed by its index, and deleting one shifts every later scene down.
"""

import logging
from typing import Any

from pydantic import ValidationError

from promptshelf.models import Entry, Scene, StoryDocument, TimelineSegment
from promptshelf.normalize import parse_duration, parse_tags

from .core import load_snapshot, save_snapshot, storage_lock
from .errors import IndexOutOfRange, InvalidArgument, MissingField

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("prompt_text", "video_title", "animation_prompt")


def _load(owner: str) -> tuple[dict[str, Any], StoryDocument]:
    snapshot = load_snapshot(owner)
    return snapshot, StoryDocument.model_validate(snapshot["story"])


def _save(owner: str, snapshot: dict[str, Any], story: StoryDocument) -> StoryDocument:
    snapshot["story"] = story.model_dump()
    save_snapshot(owner, snapshot)
    return story


def _check_index(story: StoryDocument, index: int) -> None:
    if index < 0 or index >= len(story.scenes):
        raise IndexOutOfRange(f"Scene index {index} out of range")


def get_story(owner: str) -> StoryDocument:
    """Return owner's story, or an empty default one."""
    return StoryDocument.model_validate(load_snapshot(owner)["story"])


def update_story_meta(
    owner: str, scenario: str | None = None, theme_color: str | None = None
) -> StoryDocument:
    with storage_lock():
        snapshot, story = _load(owner)
        try:
            if scenario is not None:
                story.scenario = scenario
            if theme_color is not None:
                story.theme_color = theme_color
        except ValidationError as e:
            raise InvalidArgument(str(e)) from e
        return _save(owner, snapshot, story)


def add_scene(owner: str, data: dict[str, Any]) -> StoryDocument:
    """Append a scene. Only the image is required."""
    if not data.get("image"):
        raise MissingField("image")
    done = data.get("done", False)
    try:
        scene = Scene(
            image=data["image"],
            duration=parse_duration(data.get("duration")),
            tags=parse_tags(data.get("tags")),
            done=done if isinstance(done, bool) else False,
            **{key: data.get(key) or "" for key in _TEXT_FIELDS},
        )
    except ValidationError as e:
        raise InvalidArgument(str(e)) from e
    with storage_lock():
        snapshot, story = _load(owner)
        story.scenes.append(scene)
        return _save(owner, snapshot, story)


def clone_scene_from_entry(owner: str, entry: Entry) -> StoryDocument:
    """Append a scene built from a saved entry; its prompt doubles as title."""
    scene = Scene(
        image=entry.image,
        prompt_text=entry.prompt_text,
        video_title=entry.prompt_text,
        tags=list(entry.tags),
    )
    with storage_lock():
        snapshot, story = _load(owner)
        story.scenes.append(scene)
        return _save(owner, snapshot, story)


def update_scene(owner: str, index: int, fields: dict[str, Any]) -> StoryDocument:
    """Overwrite the fields present in ``fields``; keep the rest.

    The image changes only when new image data is given, and the duration
    only when it parses to a positive number.
    """
    with storage_lock():
        snapshot, story = _load(owner)
        _check_index(story, index)
        scene = story.scenes[index]
        try:
            for key in _TEXT_FIELDS:
                if fields.get(key) is not None:
                    setattr(scene, key, fields[key])
            if fields.get("image"):
                scene.image = fields["image"]
        except ValidationError as e:
            raise InvalidArgument(str(e)) from e
        duration = parse_duration(fields.get("duration"))
        if duration is not None:
            scene.duration = duration
        if fields.get("tags") is not None:
            scene.tags = parse_tags(fields["tags"])
        if isinstance(fields.get("done"), bool):
            scene.done = fields["done"]
        return _save(owner, snapshot, story)


def delete_scene(owner: str, index: int) -> StoryDocument:
    with storage_lock():
        snapshot, story = _load(owner)
        _check_index(story, index)
        story.scenes.pop(index)
        _save(owner, snapshot, story)
    logger.info(f"Deleted scene {index} of {owner!r}")
    return story


def set_scene_done(owner: str, index: int, done: bool) -> StoryDocument:
    with storage_lock():
        snapshot, story = _load(owner)
        _check_index(story, index)
        story.scenes[index].done = bool(done)
        return _save(owner, snapshot, story)


def story_timeline(owner: str) -> list[TimelineSegment]:
    """Timeline scale: each scene's share is proportional to its duration.

    Scenes without a duration count as one second.
    """
    scenes = get_story(owner).scenes
    weights = [s.duration or 1 for s in scenes]
    total = sum(weights)
    return [
        TimelineSegment(index=i, duration=s.duration, weight=w, share=w / total)
        for i, (s, w) in enumerate(zip(scenes, weights))
    ]
