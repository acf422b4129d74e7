from backend.src.core.events.billing_events import CheckoutCompleted, CheckoutSessionCreated

__all__ = ["CheckoutCompleted", "CheckoutSessionCreated"]
