"""
Development payment gateway: no external calls, unsigned webhook events.
"""
from __future__ import annotations

import json
import logging
import uuid
from typing import Optional

from backend.src.adapters.outbound.payments.checkout_events import checkout_completed_from_event
from backend.src.core.events.billing_events import CheckoutCompleted, CheckoutSessionCreated
from backend.src.core.exceptions import WebhookVerificationError
from backend.src.core.value_objects.credit_pack import CreditPack

logger = logging.getLogger(__name__)


class NoopPaymentGateway:
    """Returns a local success URL and accepts Stripe-shaped JSON without a signature.

    Credits are only granted when a matching webhook body is posted, so
    local flows exercise the same fulfilment path as production.
    """

    def __init__(self, app_url: str = "http://localhost:8000"):
        self._app_url = app_url.rstrip("/")

    async def create_checkout_session(
        self, user_id: str, email: str, pack: CreditPack
    ) -> CheckoutSessionCreated:
        session_id = f"cs_dev_{uuid.uuid4().hex}"
        logger.info("Dev checkout session %s for user=%s pack=%s", session_id, user_id, pack.id)
        return CheckoutSessionCreated(
            session_id=session_id,
            url=f"{self._app_url}/app?success=true&credits={pack.credits}&session_id={session_id}",
            user_id=user_id,
            pack_id=pack.id,
        )

    def parse_webhook_event(self, payload: bytes, signature: str) -> Optional[CheckoutCompleted]:
        try:
            event = json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise WebhookVerificationError("Invalid payload") from exc
        if not isinstance(event, dict):
            raise WebhookVerificationError("Invalid payload")
        return checkout_completed_from_event(event)
