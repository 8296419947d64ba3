"""Prompt entry CRUD + search endpoints."""

from fastapi import APIRouter, HTTPException

from promptshelf import storage

from .models import CreateEntry, UpdateEntry

router = APIRouter()


@router.get("/entries")
async def list_entries(username: str, category: str = storage.ALL_CATEGORIES, q: str = ""):
    """List a user's entries, optionally filtered by category and search term."""
    if not username:
        raise HTTPException(400, "username query required")
    return storage.search_entries(username, category, q)


@router.post("/entries")
async def create_entry(body: CreateEntry):
    """Save a new prompt entry."""
    try:
        return storage.create_entry(
            body.owner, body.category, body.prompt_text, body.image,
            tags=body.tags, done=body.done,
        )
    except storage.MissingField as e:
        raise HTTPException(400, str(e))


@router.put("/entries/{entry_id}")
async def update_entry(entry_id: str, body: UpdateEntry):
    """Partially update an entry. Only supplied fields change."""
    fields = body.model_dump(exclude_none=True)
    try:
        return storage.update_entry(entry_id, fields)
    except storage.NotFound as e:
        raise HTTPException(404, str(e))
    except storage.OwnerMismatch as e:
        raise HTTPException(403, str(e))


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: str):
    """Delete an entry."""
    try:
        storage.delete_entry(entry_id)
    except storage.NotFound as e:
        raise HTTPException(404, str(e))
    return {"success": True}
