"""
Dependency injection container.
Wires together ports and adapters based on configuration.
"""
from __future__ import annotations

import logging
from typing import Optional

from backend.src.infrastructure.config import Settings

logger = logging.getLogger(__name__)


class ApplicationContainer:
    """Simplified container that builds concrete instances from settings.

    Usage::

        container = ApplicationContainer(settings)
        service = container.conversion_service()
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._cache: dict[str, object] = {}

    def _get_or_create(self, key: str, factory):
        if key not in self._cache:
            self._cache[key] = factory(self.settings)
        return self._cache[key]

    # ── Lazy factory helpers ──────────────────────────────────────

    @staticmethod
    def _build_user_auth(settings: Settings):
        if settings.firebase.enabled:
            from backend.src.adapters.outbound.firebase.firebase_auth import FirebaseAuthAdapter
            return FirebaseAuthAdapter(
                credentials_path=settings.firebase.credentials_path,
                project_id=settings.firebase.project_id,
            )
        else:
            from backend.src.adapters.outbound.firebase.noop_auth import NoopAuthAdapter
            return NoopAuthAdapter()

    @staticmethod
    def _build_code_generator(settings: Settings):
        backend = settings.generator_backend
        if backend == "anthropic":
            from backend.src.adapters.outbound.ai.anthropic_generator import AnthropicCodeGenerator
            return AnthropicCodeGenerator(
                api_key=settings.anthropic.api_key,
                model=settings.anthropic.model,
                max_tokens=settings.anthropic.max_tokens,
                timeout=settings.anthropic.timeout,
            )
        if backend == "gemini":
            from backend.src.adapters.outbound.ai.gemini_generator import GeminiCodeGenerator
            return GeminiCodeGenerator(
                api_key=settings.gemini.api_key,
                model=settings.gemini.model,
            )
        if backend == "ollama":
            from backend.src.adapters.outbound.ai.ollama_generator import OllamaCodeGenerator
            return OllamaCodeGenerator(
                base_url=settings.ollama.base_url,
                model=settings.ollama.vision_model,
                timeout=settings.ollama.timeout,
            )
        if backend != "placeholder":
            logger.warning("Unknown generator backend %r, using placeholder output", backend)
        from backend.src.adapters.outbound.ai.placeholder_generator import PlaceholderCodeGenerator
        return PlaceholderCodeGenerator()

    @staticmethod
    def _session_factory(settings: Settings):
        from backend.src.infrastructure.database import get_async_session_factory
        return get_async_session_factory(
            settings.database.url,
            echo=settings.database.echo,
            pool_size=settings.database.pool_size,
            max_overflow=settings.database.max_overflow,
        )

    @staticmethod
    def _build_account_repository(settings: Settings):
        if settings.persistence_backend == "postgres":
            from backend.src.adapters.outbound.persistence.postgres_account_repo import PostgresAccountRepository
            return PostgresAccountRepository(ApplicationContainer._session_factory(settings))
        else:
            from backend.src.adapters.outbound.persistence.in_memory_account_repo import InMemoryAccountRepository
            return InMemoryAccountRepository()

    @staticmethod
    def _build_conversion_repository(settings: Settings):
        if settings.persistence_backend == "postgres":
            from backend.src.adapters.outbound.persistence.postgres_conversion_repo import PostgresConversionRepository
            return PostgresConversionRepository(ApplicationContainer._session_factory(settings))
        else:
            from backend.src.adapters.outbound.persistence.in_memory_conversion_repo import InMemoryConversionRepository
            return InMemoryConversionRepository()

    @staticmethod
    def _build_purchase_repository(settings: Settings):
        if settings.persistence_backend == "postgres":
            from backend.src.adapters.outbound.persistence.postgres_purchase_repo import PostgresPurchaseRepository
            return PostgresPurchaseRepository(ApplicationContainer._session_factory(settings))
        else:
            from backend.src.adapters.outbound.persistence.in_memory_purchase_repo import InMemoryPurchaseRepository
            return InMemoryPurchaseRepository()

    @staticmethod
    def _build_payment_gateway(settings: Settings):
        if settings.stripe.enabled:
            from backend.src.adapters.outbound.payments.stripe_gateway import StripePaymentGateway
            return StripePaymentGateway(
                secret_key=settings.stripe.secret_key,
                webhook_secret=settings.stripe.webhook_secret,
                app_url=settings.app_url,
                currency=settings.stripe.currency,
            )
        from backend.src.adapters.outbound.payments.noop_gateway import NoopPaymentGateway
        return NoopPaymentGateway(app_url=settings.app_url)

    @staticmethod
    def _build_quality_analyzer(settings: Settings):
        from backend.src.core.services.code_quality import CodeQualityAnalyzer
        return CodeQualityAnalyzer()

    # ── Port accessors ─────────────────────────────────────────────

    def user_auth(self):
        return self._get_or_create("user_auth", self._build_user_auth)

    def code_generator(self):
        return self._get_or_create("code_generator", self._build_code_generator)

    def account_repository(self):
        return self._get_or_create("account_repository", self._build_account_repository)

    def conversion_repository(self):
        return self._get_or_create("conversion_repository", self._build_conversion_repository)

    def purchase_repository(self):
        return self._get_or_create("purchase_repository", self._build_purchase_repository)

    def payment_gateway(self):
        return self._get_or_create("payment_gateway", self._build_payment_gateway)

    def quality_analyzer(self):
        return self._get_or_create("quality_analyzer", self._build_quality_analyzer)

    # ── Application services ───────────────────────────────────────

    def credit_service(self):
        from backend.src.application.credit_service import CreditService
        return CreditService(
            repository=self.account_repository(),
            free_credits=self.settings.credits.free_credits,
        )

    def conversion_service(self):
        from backend.src.application.conversion_service import ConversionService
        return ConversionService(
            generator=self.code_generator(),
            credits=self.credit_service(),
            conversions=self.conversion_repository(),
            analyzer=self.quality_analyzer(),
            history_limit=self.settings.credits.history_limit,
        )

    def billing_service(self):
        from backend.src.application.billing_service import BillingService
        return BillingService(
            gateway=self.payment_gateway(),
            credits=self.credit_service(),
            purchases=self.purchase_repository(),
        )
