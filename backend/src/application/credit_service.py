"""
Credit balance use cases.

Balance changes go through the repository's atomic ``adjust_credits`` so
concurrent conversions and webhook deliveries cannot lose an update.
"""
from __future__ import annotations

import logging

from backend.src.core.entities.account import FREE_CREDITS, Account
from backend.src.core.exceptions import AccountNotFoundError

logger = logging.getLogger(__name__)


class CreditService:
    """Reads and adjusts per-user credit balances."""

    def __init__(self, repository, free_credits: int = FREE_CREDITS):
        self._repository = repository  # AccountRepositoryPort
        self._free_credits = free_credits

    async def get_or_create_account(self, user_id: str, email: str = "") -> Account:
        account, created = await self._repository.get_or_create(
            Account(user_id=user_id, email=email, credits=self._free_credits)
        )
        if created:
            logger.info("Account created for %s with %d free credits", user_id, self._free_credits)
        return account

    async def get_balance(self, user_id: str) -> int:
        account = await self._repository.get_by_user_id(user_id)
        return account.credits if account is not None else 0

    async def add_credits(self, user_id: str, amount: int) -> Account:
        if amount <= 0:
            raise ValueError(f"Credit amount must be positive, got {amount}")
        account = await self._repository.adjust_credits(user_id, amount)
        if account is None:
            raise AccountNotFoundError(user_id)
        logger.info("Added %d credits to %s (balance=%d)", amount, user_id, account.credits)
        return account

    async def deduct_credit(self, user_id: str) -> Account:
        account = await self._repository.adjust_credits(user_id, -1)
        if account is None:
            raise AccountNotFoundError(user_id)
        return account
