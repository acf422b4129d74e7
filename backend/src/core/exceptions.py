"""Custom exception hierarchy for SketchToCode."""
from __future__ import annotations


class SketchToCodeError(Exception):
    """Base exception for all SketchToCode errors."""


class AccountNotFoundError(SketchToCodeError):
    """Raised when no credit account exists for a user."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"Account not found: {user_id}")


class InsufficientCreditsError(SketchToCodeError):
    """Raised when a conversion is requested without a spare credit."""

    def __init__(self, user_id: str, credits: int = 0) -> None:
        self.user_id = user_id
        self.credits = credits
        super().__init__("Insufficient credits. Please purchase more credits to continue.")


class InvalidCreditPackError(SketchToCodeError):
    """Raised when checkout is requested for an unknown credit pack."""

    def __init__(self, pack_id: str) -> None:
        self.pack_id = pack_id
        super().__init__(f"Invalid pack selected: {pack_id}")


class CodeGenerationError(SketchToCodeError):
    """Raised when the vision model call fails after all retries."""


class PaymentError(SketchToCodeError):
    """Raised when the payment provider rejects a request."""


class WebhookVerificationError(SketchToCodeError):
    """Raised when a payment webhook fails signature verification."""
