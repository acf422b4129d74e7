"""In-memory implementation of ConversionRepositoryPort."""

from __future__ import annotations

import asyncio
import logging

from backend.src.core.entities.conversion import Conversion

logger = logging.getLogger(__name__)


class InMemoryConversionRepository:
    def __init__(self) -> None:
        self._store: dict[str, Conversion] = {}
        self._lock = asyncio.Lock()

    async def save(self, conversion: Conversion) -> Conversion:
        async with self._lock:
            self._store[conversion.id] = conversion
            logger.debug("Saved conversion %s for %s", conversion.id, conversion.user_id)
            return conversion

    async def list_by_user(self, user_id: str, limit: int = 50) -> list[Conversion]:
        """Newest first, at most ``limit`` entries."""
        async with self._lock:
            owned = [c for c in self._store.values() if c.user_id == user_id]
        owned.sort(key=lambda c: c.created_at, reverse=True)
        return owned[:limit]
