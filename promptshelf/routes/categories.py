"""Category list endpoints. Rename and delete cascade into entries."""

from fastapi import APIRouter, HTTPException

from promptshelf import storage

from .models import CreateCategory, RenameCategory

router = APIRouter()


@router.get("/categories")
async def list_categories():
    """List categories in display order."""
    return storage.list_categories()


@router.post("/categories")
async def add_category(body: CreateCategory):
    """Append a category."""
    try:
        return storage.add_category(body.name)
    except storage.MissingField:
        raise HTTPException(400, "Name required")
    except storage.DuplicateCategory as e:
        raise HTTPException(409, str(e))


@router.put("/categories/{old_name}")
async def rename_category(old_name: str, body: RenameCategory):
    """Rename a category and move its entries along."""
    try:
        return storage.rename_category(old_name, body.new_name)
    except storage.NotFound as e:
        raise HTTPException(404, str(e))
    except storage.InvalidArgument as e:
        raise HTTPException(400, str(e))
    except storage.DuplicateCategory as e:
        raise HTTPException(409, str(e))


@router.delete("/categories/{name}")
async def remove_category(name: str):
    """Delete a category; its entries fall back to "Other"."""
    try:
        return storage.remove_category(name)
    except storage.NotFound as e:
        raise HTTPException(404, str(e))
    except storage.LastCategoryError as e:
        raise HTTPException(400, str(e))
