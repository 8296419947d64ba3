"""Reference material endpoints."""

from fastapi import APIRouter, HTTPException

from promptshelf import storage

from .models import CreateMaterial

router = APIRouter()


@router.get("/materials")
async def list_materials(username: str, q: str = ""):
    """List a user's materials, optionally filtered by search term."""
    if not username:
        raise HTTPException(400, "username query required")
    return storage.search_materials(username, q)


@router.post("/materials")
async def create_material(body: CreateMaterial):
    """Bookmark a link or video."""
    try:
        return storage.create_material(body.owner, body.title, body.type, body.url, body.tags)
    except storage.MissingField as e:
        raise HTTPException(400, str(e))


@router.delete("/materials/{material_id}")
async def delete_material(material_id: str):
    """Delete a material."""
    try:
        storage.delete_material(material_id)
    except storage.NotFound as e:
        raise HTTPException(404, str(e))
    return {"success": True}
