"""Port for credit account persistence."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.entities.account import Account


@runtime_checkable
class AccountRepositoryPort(Protocol):
    async def get_by_user_id(self, user_id: str) -> Optional[Account]: ...
    async def save(self, account: Account) -> Account: ...

    async def get_or_create(self, account: Account) -> tuple[Account, bool]:
        """Insert *account* unless one exists; backfill a blank email.

        Returns the stored account and whether it was created.
        """
        ...

    async def adjust_credits(self, user_id: str, delta: int) -> Optional[Account]:
        """Atomically apply a credit delta. ``None`` if the account is missing."""
        ...
