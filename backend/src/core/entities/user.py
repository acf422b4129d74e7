"""Authenticated user identity supplied by the auth provider."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Identity attached to a request by the auth middleware.

    ``id`` is the provider's stable uid and is the key for accounts,
    conversions and purchases. Credit state lives on :class:`Account`.
    """

    id: str
    email: str = ""
    email_verified: bool = False
    display_name: str = ""
    provider: str = ""  # e.g. "google.com", "password"
    is_anonymous: bool = False
