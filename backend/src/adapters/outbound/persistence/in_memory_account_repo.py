"""In-memory implementation of AccountRepositoryPort."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from backend.src.core.entities.account import Account

logger = logging.getLogger(__name__)


class InMemoryAccountRepository:
    """Lock-guarded account store for development and tests.

    Copies are stored and returned so callers cannot mutate the stored
    balance without going through :meth:`save`.
    """

    def __init__(self) -> None:
        self._store: dict[str, Account] = {}
        self._lock = asyncio.Lock()

    async def get_by_user_id(self, user_id: str) -> Optional[Account]:
        async with self._lock:
            account = self._store.get(user_id)
            return replace(account) if account is not None else None

    async def save(self, account: Account) -> Account:
        async with self._lock:
            account.updated_at = datetime.utcnow()
            self._store[account.user_id] = replace(account)
            logger.debug("Saved account %s (credits=%d)", account.user_id, account.credits)
            return account

    async def get_or_create(self, account: Account) -> tuple[Account, bool]:
        async with self._lock:
            stored = self._store.get(account.user_id)
            if stored is None:
                self._store[account.user_id] = replace(account)
                return replace(account), True
            if account.email and not stored.email:
                stored.email = account.email
                stored.updated_at = datetime.utcnow()
            return replace(stored), False

    async def adjust_credits(self, user_id: str, delta: int) -> Optional[Account]:
        async with self._lock:
            stored = self._store.get(user_id)
            if stored is None:
                return None
            stored.apply_credit_delta(delta)
            return replace(stored)
