"""Shared test fixtures for all tests."""
from __future__ import annotations

import pytest
from unittest.mock import AsyncMock, MagicMock

from backend.src.core.entities.account import Account
from backend.src.core.entities.user import User
from backend.src.core.events.billing_events import CheckoutSessionCreated
from backend.src.core.value_objects.generated_code import GeneratedCode


# ── Markup Fixtures ────────────────────────────────────────────────────────

WELL_FORMED_HTML = (
    '<!DOCTYPE html><html><head><meta charset="UTF-8">'
    '<meta name="viewport" content="width=device-width">'
    "</head><body><header><nav></nav></header><main><section>"
    "<h1>Title</h1><ul><li>x</li></ul></section></main>"
    "<footer></footer></body></html>"
)

RESPONSIVE_CSS = (
    "/* layout */ .container { display:flex; padding: 1rem; max-width: 100%; } "
    "@media (min-width: 768px) { .container { padding: 2rem; } }"
)


@pytest.fixture
def well_formed_html() -> str:
    return WELL_FORMED_HTML


@pytest.fixture
def responsive_css() -> str:
    return RESPONSIVE_CSS


# ── Entity Fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def sample_user() -> User:
    return User(id="user-1", email="ada@example.com", email_verified=True, display_name="Ada")


@pytest.fixture
def sample_account() -> Account:
    return Account(user_id="user-1", email="ada@example.com", credits=2)


@pytest.fixture
def sample_generated_code() -> GeneratedCode:
    return GeneratedCode(
        html=WELL_FORMED_HTML,
        css=RESPONSIVE_CSS,
        js="const x = 1;",
        react="export default function Page() { return null }",
        structure={"type": "page", "sections": ["header", "main", "footer"]},
    )


# ── Mock Port Fixtures ─────────────────────────────────────────────────────

@pytest.fixture
def mock_code_generator(sample_generated_code):
    mock = AsyncMock()
    mock.generate.return_value = sample_generated_code
    mock.test_connection = MagicMock(return_value=True)
    return mock


@pytest.fixture
def mock_account_repository():
    mock = AsyncMock()
    mock.get_by_user_id.return_value = None
    mock.save.side_effect = lambda account: account
    mock.get_or_create.side_effect = lambda account: (account, True)
    mock.adjust_credits.return_value = None
    return mock


@pytest.fixture
def mock_conversion_repository():
    mock = AsyncMock()
    mock.save.side_effect = lambda conversion: conversion
    mock.list_by_user.return_value = []
    return mock


@pytest.fixture
def mock_purchase_repository():
    mock = AsyncMock()
    mock.get_by_session_id.return_value = None
    mock.save.side_effect = lambda purchase: purchase
    mock.claim.return_value = True
    return mock


@pytest.fixture
def mock_payment_gateway():
    mock = MagicMock()
    mock.create_checkout_session = AsyncMock(
        return_value=CheckoutSessionCreated(
            session_id="cs_test_123",
            url="https://checkout.stripe.com/c/pay/cs_test_123",
            user_id="user-1",
            pack_id="pack_10",
        )
    )
    mock.parse_webhook_event.return_value = None
    return mock
