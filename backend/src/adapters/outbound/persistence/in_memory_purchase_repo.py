"""In-memory implementation of PurchaseRepositoryPort."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from backend.src.core.entities.purchase import Purchase

logger = logging.getLogger(__name__)


class InMemoryPurchaseRepository:
    def __init__(self) -> None:
        self._by_session: dict[str, Purchase] = {}
        self._lock = asyncio.Lock()

    async def save(self, purchase: Purchase) -> Purchase:
        async with self._lock:
            self._by_session[purchase.stripe_session_id] = purchase
            logger.debug("Recorded purchase %s (%d credits)", purchase.id, purchase.credits_purchased)
            return purchase

    async def get_by_session_id(self, session_id: str) -> Optional[Purchase]:
        async with self._lock:
            return self._by_session.get(session_id)

    async def claim(self, purchase: Purchase) -> bool:
        async with self._lock:
            if purchase.stripe_session_id in self._by_session:
                return False
            self._by_session[purchase.stripe_session_id] = purchase
            logger.debug("Claimed session %s for purchase %s", purchase.stripe_session_id, purchase.id)
            return True
