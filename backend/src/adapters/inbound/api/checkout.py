"""
Credit pack checkout API routes.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from backend.src.adapters.inbound.api.dependencies import get_current_user
from backend.src.core.entities.user import User
from backend.src.core.value_objects.credit_pack import CREDIT_PACKS

router = APIRouter()


class CheckoutBody(BaseModel):
    pack_id: str = Field(default="", alias="packId")

    model_config = {"populate_by_name": True}


@router.get("/packs")
async def list_packs():
    return {"packs": [pack.to_dict() for pack in CREDIT_PACKS]}


@router.post("")
async def create_checkout(
    body: CheckoutBody,
    request: Request,
    user: User = Depends(get_current_user),
):
    service = request.app.state.container.billing_service()
    url = await service.create_checkout(user, body.pack_id)
    return {"url": url}
