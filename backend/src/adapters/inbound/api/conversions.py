"""
Wireframe conversion and history API routes.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from backend.src.adapters.inbound.api.dependencies import get_current_user
from backend.src.application.dto.convert_request import SUPPORTED_FORMATS, ConvertRequest
from backend.src.core.entities.user import User

router = APIRouter()


class ConvertBody(BaseModel):
    image: str = ""
    format: str = "html"
    media_type: str = Field(default="image/jpeg", alias="mediaType")

    model_config = {"populate_by_name": True}


def _get_conversion_service(request: Request):
    return request.app.state.container.conversion_service()


@router.post("/convert")
async def convert(
    body: ConvertBody,
    request: Request,
    user: User = Depends(get_current_user),
):
    if body.format.lower() not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format: {body.format}")
    service = _get_conversion_service(request)
    result = await service.convert(
        user,
        ConvertRequest(image=body.image, format=body.format, media_type=body.media_type),
    )
    return result.to_dict()


@router.get("/history")
async def history(
    request: Request,
    user: User = Depends(get_current_user),
):
    service = _get_conversion_service(request)
    conversions = await service.history(user.id)
    return {"history": [c.to_dict() for c in conversions]}
