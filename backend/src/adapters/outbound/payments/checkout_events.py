"""Translation of Stripe-shaped event payloads into domain events."""

from __future__ import annotations

import logging
from typing import Any, Optional

from backend.src.core.events.billing_events import CheckoutCompleted

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"


def checkout_completed_from_event(event: dict[str, Any]) -> Optional[CheckoutCompleted]:
    """Return a CheckoutCompleted for ``checkout.session.completed`` events.

    Any other event type yields None. Missing metadata is passed through as
    empty values so the billing service can decide what to do with it.
    """
    event_type = event.get("type")
    if event_type != CHECKOUT_COMPLETED:
        logger.debug("Ignoring webhook event type %s", event_type)
        return None

    session = (event.get("data") or {}).get("object") or {}
    metadata = session.get("metadata") or {}
    details = session.get("customer_details") or {}

    try:
        credits = int(metadata.get("credits") or 0)
    except (TypeError, ValueError):
        credits = 0

    return CheckoutCompleted(
        session_id=str(session.get("id", "")),
        user_id=metadata.get("userId") or None,
        credits=credits,
        pack_id=metadata.get("packId") or None,
        customer_email=session.get("customer_email") or details.get("email") or "",
        amount_total_cents=session.get("amount_total"),
    )
