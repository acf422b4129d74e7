"""FastAPI dependencies for request authentication."""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request

from backend.src.core.entities.user import User


async def get_current_user(request: Request) -> User:
    """Return the user attached by the Bearer token middleware.

    With Firebase disabled the noop adapter supplies a development user,
    so this only fails when a protected route was reached without auth.
    """
    user: Optional[User] = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
