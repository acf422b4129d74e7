"""
Credit pack checkout and payment fulfilment use cases.
"""
from __future__ import annotations

import logging
from typing import Optional

from backend.src.application.credit_service import CreditService
from backend.src.core.entities.purchase import Purchase
from backend.src.core.entities.user import User
from backend.src.core.exceptions import InvalidCreditPackError
from backend.src.core.value_objects.credit_pack import find_credit_pack

logger = logging.getLogger(__name__)


class BillingService:
    """Creates hosted checkout sessions and credits paid sessions."""

    def __init__(self, gateway, credits: CreditService, purchases):
        self._gateway = gateway        # PaymentGatewayPort
        self._credits = credits
        self._purchases = purchases    # PurchaseRepositoryPort

    async def create_checkout(self, user: User, pack_id: str) -> str:
        pack = find_credit_pack(pack_id)
        if pack is None:
            raise InvalidCreditPackError(pack_id)
        if not user.email:
            raise ValueError("No email found")

        logger.info("Creating checkout session: user=%s pack=%s", user.id, pack.id)
        session = await self._gateway.create_checkout_session(user.id, user.email, pack)
        return session.url

    async def handle_webhook(self, payload: bytes, signature: str) -> Optional[Purchase]:
        """Fulfil a completed checkout. Returns the new purchase, if any.

        Verification failures raise; unrelated or incomplete events are
        acknowledged and ignored.
        """
        event = self._gateway.parse_webhook_event(payload, signature)
        if event is None:
            return None

        logger.info(
            "Checkout completed: session=%s user=%s credits=%d",
            event.session_id, event.user_id, event.credits,
        )
        if not event.user_id or event.credits <= 0:
            logger.error("Missing metadata in checkout session %s", event.session_id)
            return None

        purchase = Purchase(
            user_id=event.user_id,
            stripe_session_id=event.session_id,
            credits_purchased=event.credits,
            amount_paid=event.amount_paid,
        )
        # The claim is the idempotency gate: only its winner credits.
        if not await self._purchases.claim(purchase):
            logger.info("Session %s already fulfilled, skipping", event.session_id)
            return None

        await self._credits.get_or_create_account(event.user_id, event.customer_email)
        await self._credits.add_credits(event.user_id, event.credits)
        logger.info("Added %d credits to user %s", event.credits, event.user_id)
        return purchase
