"""Domain events emitted by the payment provider."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CheckoutSessionCreated:
    session_id: str
    url: str
    user_id: str
    pack_id: str
    timestamp: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class CheckoutCompleted:
    """A hosted checkout finished and was paid.

    ``user_id`` and ``credits`` come from the metadata attached when the
    session was created and may be missing on foreign sessions.
    """

    session_id: str
    user_id: Optional[str] = None
    credits: int = 0
    pack_id: Optional[str] = None
    customer_email: str = ""
    amount_total_cents: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.utcnow)

    @property
    def amount_paid(self) -> float:
        return self.amount_total_cents / 100 if self.amount_total_cents else 0.0
