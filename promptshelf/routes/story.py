"""Story document + scene timeline endpoints, nested under a user."""

from fastapi import APIRouter, HTTPException

from promptshelf import storage

from .models import CreateScene, SceneDone, UpdateScene, UpdateStoryMeta

router = APIRouter()


@router.get("/users/{username}/story")
async def get_story(username: str):
    """Get the user's story (an empty one if never saved)."""
    return storage.get_story(username)


@router.patch("/users/{username}/story")
async def update_story_meta(username: str, body: UpdateStoryMeta):
    """Update scenario text and/or theme color."""
    try:
        return storage.update_story_meta(username, body.scenario, body.theme_color)
    except storage.InvalidArgument as e:
        raise HTTPException(400, str(e))


@router.get("/users/{username}/story/timeline")
async def story_timeline(username: str):
    """Proportional timeline segments, one per scene."""
    return storage.story_timeline(username)


@router.post("/users/{username}/story/scenes", status_code=201)
async def add_scene(username: str, body: CreateScene):
    """Append a scene. An image is required."""
    try:
        return storage.add_scene(username, body.model_dump())
    except (storage.MissingField, storage.InvalidArgument) as e:
        raise HTTPException(400, str(e))


@router.post("/users/{username}/story/scenes/from-entry/{entry_id}", status_code=201)
async def clone_scene_from_entry(username: str, entry_id: str):
    """Append a scene copied from one of the user's entries."""
    entry = storage.get_entry(entry_id)
    if not entry or entry.owner != username:
        raise HTTPException(404, "Entry not found")
    return storage.clone_scene_from_entry(username, entry)


@router.patch("/users/{username}/story/scenes/{index}")
async def update_scene(username: str, index: int, body: UpdateScene):
    """Update the scene at index. Omitted fields are kept."""
    try:
        return storage.update_scene(username, index, body.model_dump(exclude_none=True))
    except storage.IndexOutOfRange:
        raise HTTPException(404, "Scene not found")
    except storage.InvalidArgument as e:
        raise HTTPException(400, str(e))


@router.delete("/users/{username}/story/scenes/{index}")
async def delete_scene(username: str, index: int):
    """Delete the scene at index; later scenes move up."""
    try:
        return storage.delete_scene(username, index)
    except storage.IndexOutOfRange:
        raise HTTPException(404, "Scene not found")


@router.put("/users/{username}/story/scenes/{index}/done")
async def set_scene_done(username: str, index: int, body: SceneDone):
    """Mark the scene at index done or not done."""
    try:
        return storage.set_scene_done(username, index, body.done)
    except storage.IndexOutOfRange:
        raise HTTPException(404, "Scene not found")
