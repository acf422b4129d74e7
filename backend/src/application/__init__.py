from backend.src.application.billing_service import BillingService
from backend.src.application.conversion_service import ConversionService
from backend.src.application.credit_service import CreditService

__all__ = ["BillingService", "ConversionService", "CreditService"]
