"""Port for recording fulfilled credit purchases."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.entities.purchase import Purchase


@runtime_checkable
class PurchaseRepositoryPort(Protocol):
    async def save(self, purchase: Purchase) -> Purchase: ...
    async def get_by_session_id(self, session_id: str) -> Optional[Purchase]: ...

    async def claim(self, purchase: Purchase) -> bool:
        """Record *purchase* unless its session id is already recorded."""
        ...
