"""
Payment provider webhook routes. Exempt from Bearer auth; the payload
signature is checked by the payment gateway instead.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.post("/stripe")
async def stripe_webhook(request: Request):
    payload = await request.body()
    signature = request.headers.get("stripe-signature", "")
    service = request.app.state.container.billing_service()
    await service.handle_webhook(payload, signature)
    return {"received": True}
