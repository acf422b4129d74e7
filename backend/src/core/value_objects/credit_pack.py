"""Purchasable credit pack catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreditPack:
    id: str
    name: str
    credits: int
    price_cents: int
    savings: str = ""
    popular: bool = False

    @property
    def price_display(self) -> str:
        return f"${self.price_cents // 100}"

    @property
    def price_per_credit(self) -> float:
        return round(self.price_cents / 100 / self.credits, 2)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "credits": self.credits,
            "price": self.price_cents,
            "priceDisplay": self.price_display,
            "pricePerCredit": f"{self.price_per_credit:.2f}",
            "savings": self.savings,
            "popular": self.popular,
        }


CREDIT_PACKS: tuple[CreditPack, ...] = (
    CreditPack(id="pack_10", name="10 Credits", credits=10, price_cents=2500, savings="15% off"),
    CreditPack(id="pack_50", name="50 Credits", credits=50, price_cents=10000, savings="50% off", popular=True),
    CreditPack(id="pack_100", name="100 Credits", credits=100, price_cents=18000, savings="Best value"),
)


def find_credit_pack(pack_id: Optional[str]) -> Optional[CreditPack]:
    for pack in CREDIT_PACKS:
        if pack.id == pack_id:
            return pack
    return None
