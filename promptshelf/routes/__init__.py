"""FastAPI API endpoints under /api.

Endpoint groups: health + signup/login, categories, entries, story (scenes
and timeline, nested under /api/users/{username}/story), materials.
Storage errors are translated to HTTP status codes in each endpoint:
400 missing/invalid input, 401 bad login, 403 owner mismatch, 404 unknown
id or scene index, 409 duplicate user or category.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .categories import router as categories_router
from .entries import router as entries_router
from .materials import router as materials_router
from .story import router as story_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(categories_router)
router.include_router(entries_router)
router.include_router(story_router)
router.include_router(materials_router)
