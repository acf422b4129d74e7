"""
Credit balance API route.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from backend.src.adapters.inbound.api.dependencies import get_current_user
from backend.src.core.entities.user import User

router = APIRouter()


@router.get("")
async def get_credits(
    request: Request,
    user: User = Depends(get_current_user),
):
    """Balance for the caller; first contact creates the account with free credits."""
    service = request.app.state.container.credit_service()
    account = await service.get_or_create_account(user.id, user.email)
    return {"credits": account.credits}
