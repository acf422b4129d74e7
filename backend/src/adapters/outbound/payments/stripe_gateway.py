"""
Stripe Checkout adapter implementing PaymentGatewayPort.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional

import stripe

from backend.src.adapters.outbound.payments.checkout_events import checkout_completed_from_event
from backend.src.core.events.billing_events import CheckoutCompleted, CheckoutSessionCreated
from backend.src.core.exceptions import PaymentError, WebhookVerificationError
from backend.src.core.value_objects.credit_pack import CreditPack

logger = logging.getLogger(__name__)


class StripePaymentGateway:
    """Hosted checkout sessions and webhook verification through the Stripe SDK."""

    def __init__(self, secret_key: str, webhook_secret: str, app_url: str, currency: str = "usd"):
        if not secret_key:
            raise ValueError("Stripe secret key is required")
        self._secret_key = secret_key
        self._webhook_secret = webhook_secret
        self._app_url = app_url.rstrip("/")
        self._currency = currency

    async def create_checkout_session(
        self, user_id: str, email: str, pack: CreditPack
    ) -> CheckoutSessionCreated:
        loop = asyncio.get_running_loop()
        session = await loop.run_in_executor(
            None, self._create_session_sync, user_id, email, pack
        )
        logger.info("Stripe checkout session %s created for user=%s", session.id, user_id)
        return CheckoutSessionCreated(
            session_id=session.id,
            url=session.url,
            user_id=user_id,
            pack_id=pack.id,
        )

    def _create_session_sync(self, user_id: str, email: str, pack: CreditPack):
        try:
            return stripe.checkout.Session.create(
                api_key=self._secret_key,
                customer_email=email,
                payment_method_types=["card"],
                line_items=[
                    {
                        "price_data": {
                            "currency": self._currency,
                            "product_data": {
                                "name": pack.name,
                                "description": f"{pack.credits} wireframe-to-code conversions",
                            },
                            "unit_amount": pack.price_cents,
                        },
                        "quantity": 1,
                    }
                ],
                mode="payment",
                success_url=f"{self._app_url}/app?success=true&credits={pack.credits}",
                cancel_url=f"{self._app_url}/pricing?canceled=true",
                metadata={
                    "userId": user_id,
                    "packId": pack.id,
                    "credits": str(pack.credits),
                },
            )
        except stripe.StripeError as exc:
            logger.error("Stripe checkout error: %s", exc)
            raise PaymentError(f"Failed to create checkout session: {exc}") from exc

    def parse_webhook_event(self, payload: bytes, signature: str) -> Optional[CheckoutCompleted]:
        if not signature:
            raise WebhookVerificationError("Missing signature")
        if not self._webhook_secret:
            raise WebhookVerificationError("Webhook secret not configured")
        try:
            stripe.Webhook.construct_event(payload, signature, self._webhook_secret)
        except stripe.SignatureVerificationError as exc:
            logger.warning("Webhook signature verification failed: %s", exc)
            raise WebhookVerificationError("Invalid signature") from exc
        except ValueError as exc:
            raise WebhookVerificationError("Invalid payload") from exc

        # Signature is valid; read the verified body as plain JSON.
        return checkout_completed_from_event(json.loads(payload))
