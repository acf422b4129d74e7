"""Unit tests for payment gateway adapters."""
from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import patch

import pytest
import stripe

from backend.src.adapters.outbound.payments.noop_gateway import NoopPaymentGateway
from backend.src.adapters.outbound.payments.stripe_gateway import StripePaymentGateway
from backend.src.core.exceptions import PaymentError, WebhookVerificationError
from backend.src.core.value_objects.credit_pack import find_credit_pack


def _completed_event(**metadata) -> dict:
    return {
        "id": "evt_1",
        "type": "checkout.session.completed",
        "data": {
            "object": {
                "id": "cs_test_1",
                "customer_email": "ada@example.com",
                "amount_total": 2500,
                "metadata": metadata,
            }
        },
    }


class TestNoopPaymentGateway:
    @pytest.mark.asyncio
    async def test_checkout_returns_local_url(self):
        gateway = NoopPaymentGateway(app_url="http://localhost:3000/")
        session = await gateway.create_checkout_session("u1", "a@example.com", find_credit_pack("pack_10"))

        assert session.session_id.startswith("cs_dev_")
        assert session.url.startswith("http://localhost:3000/app?success=true&credits=10")
        assert session.pack_id == "pack_10"

    def test_parses_completed_event(self):
        payload = json.dumps(_completed_event(userId="u1", packId="pack_10", credits="10")).encode()

        event = NoopPaymentGateway().parse_webhook_event(payload, "")

        assert event.session_id == "cs_test_1"
        assert event.user_id == "u1"
        assert event.credits == 10
        assert event.customer_email == "ada@example.com"
        assert event.amount_paid == 25.0

    def test_other_event_types_ignored(self):
        payload = json.dumps({"type": "payment_intent.created", "data": {"object": {}}}).encode()
        assert NoopPaymentGateway().parse_webhook_event(payload, "") is None

    def test_missing_metadata_passed_through(self):
        event = NoopPaymentGateway().parse_webhook_event(json.dumps(_completed_event()).encode(), "")
        assert event.user_id is None
        assert event.credits == 0

    @pytest.mark.parametrize("payload", [b"not json", b"[1, 2]"])
    def test_invalid_payload(self, payload):
        with pytest.raises(WebhookVerificationError):
            NoopPaymentGateway().parse_webhook_event(payload, "")


class TestStripePaymentGateway:
    @pytest.fixture
    def gateway(self):
        return StripePaymentGateway(
            secret_key="sk_test_x", webhook_secret="whsec_x", app_url="https://sketch.example/"
        )

    def test_requires_secret_key(self):
        with pytest.raises(ValueError):
            StripePaymentGateway(secret_key="", webhook_secret="", app_url="http://x")

    @pytest.mark.asyncio
    async def test_create_checkout_session(self, gateway):
        created = SimpleNamespace(id="cs_live_1", url="https://checkout.stripe.com/c/pay/cs_live_1")
        with patch("stripe.checkout.Session.create", return_value=created) as create:
            session = await gateway.create_checkout_session("u1", "a@example.com", find_credit_pack("pack_50"))

        assert session.url == created.url
        kwargs = create.call_args.kwargs
        assert kwargs["customer_email"] == "a@example.com"
        assert kwargs["mode"] == "payment"
        assert kwargs["line_items"][0]["price_data"]["unit_amount"] == 10000
        assert kwargs["success_url"] == "https://sketch.example/app?success=true&credits=50"
        assert kwargs["cancel_url"] == "https://sketch.example/pricing?canceled=true"
        assert kwargs["metadata"] == {"userId": "u1", "packId": "pack_50", "credits": "50"}

    @pytest.mark.asyncio
    async def test_stripe_error_becomes_payment_error(self, gateway):
        with patch("stripe.checkout.Session.create", side_effect=stripe.StripeError("card declined")):
            with pytest.raises(PaymentError):
                await gateway.create_checkout_session("u1", "a@example.com", find_credit_pack("pack_10"))

    def test_webhook_verified_and_parsed(self, gateway):
        body = json.dumps(_completed_event(userId="u1", packId="pack_10", credits="10")).encode()
        with patch("stripe.Webhook.construct_event") as construct:
            event = gateway.parse_webhook_event(body, "t=1,v1=abc")

        construct.assert_called_once_with(body, "t=1,v1=abc", "whsec_x")
        assert event.user_id == "u1"
        assert event.credits == 10

    def test_bad_signature(self, gateway):
        error = stripe.SignatureVerificationError("bad", "t=1,v1=abc")
        with patch("stripe.Webhook.construct_event", side_effect=error):
            with pytest.raises(WebhookVerificationError):
                gateway.parse_webhook_event(b"{}", "t=1,v1=abc")

    def test_missing_signature(self, gateway):
        with pytest.raises(WebhookVerificationError):
            gateway.parse_webhook_event(b"{}", "")
