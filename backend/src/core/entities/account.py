"""Account entity - a user's credit balance."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from backend.src.core.exceptions import InsufficientCreditsError

FREE_CREDITS = 2


@dataclass
class Account:
    """Credit-holding record keyed by the auth provider's user id."""

    user_id: str
    email: str = ""
    credits: int = FREE_CREDITS
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def can_convert(self) -> bool:
        return self.credits >= 1

    def deduct_credit(self) -> int:
        if not self.can_convert:
            raise InsufficientCreditsError(self.user_id, self.credits)
        self.credits -= 1
        self.updated_at = datetime.utcnow()
        return self.credits

    def apply_credit_delta(self, delta: int) -> int:
        """Add a positive delta or spend a negative one, never going below zero."""
        if delta == 0:
            raise ValueError("Credit delta must be non-zero")
        if self.credits + delta < 0:
            raise InsufficientCreditsError(self.user_id, self.credits)
        self.credits += delta
        self.updated_at = datetime.utcnow()
        return self.credits

    def add_credits(self, amount: int) -> int:
        if amount <= 0:
            raise ValueError(f"Credit amount must be positive, got {amount}")
        self.credits += amount
        self.updated_at = datetime.utcnow()
        return self.credits
