"""Inbound port for credit purchase and fulfilment."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.entities.purchase import Purchase
    from backend.src.core.entities.user import User


@runtime_checkable
class PurchaseCreditsUseCase(Protocol):
    async def create_checkout(self, user: User, pack_id: str) -> str: ...
    async def handle_webhook(self, payload: bytes, signature: str) -> Optional[Purchase]: ...
