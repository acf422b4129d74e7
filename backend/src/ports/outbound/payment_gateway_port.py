"""Port for the hosted checkout provider."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.events.billing_events import CheckoutCompleted, CheckoutSessionCreated
    from backend.src.core.value_objects.credit_pack import CreditPack


@runtime_checkable
class PaymentGatewayPort(Protocol):
    async def create_checkout_session(self, user_id: str, email: str, pack: CreditPack) -> CheckoutSessionCreated: ...
    def parse_webhook_event(self, payload: bytes, signature: str) -> Optional[CheckoutCompleted]: ...
