"""Health check, signup, and login endpoints."""

from fastapi import APIRouter, HTTPException

from promptshelf import storage

from .models import Credentials

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.post("/signup")
def signup(body: Credentials):
    """Create an account."""
    try:
        user = storage.register_user(body.username, body.password)
    except storage.MissingField:
        raise HTTPException(400, "Username and password required")
    except storage.DuplicateUser as e:
        raise HTTPException(409, str(e))
    return {"success": True, "user": user}


@router.post("/login")
def login(body: Credentials):
    """Check a username/password pair."""
    try:
        user = storage.authenticate(body.username, body.password)
    except storage.InvalidCredentials as e:
        raise HTTPException(401, str(e))
    return {"success": True, "user": user}
