"""Purchase entity - a fulfilled credit pack checkout."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Purchase:
    user_id: str
    stripe_session_id: str
    credits_purchased: int
    amount_paid: float = 0.0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)
