from backend.src.ports.outbound.account_repository_port import AccountRepositoryPort
from backend.src.ports.outbound.code_generation_port import CodeGenerationPort
from backend.src.ports.outbound.conversion_repository_port import ConversionRepositoryPort
from backend.src.ports.outbound.payment_gateway_port import PaymentGatewayPort
from backend.src.ports.outbound.purchase_repository_port import PurchaseRepositoryPort
from backend.src.ports.outbound.user_auth_port import UserAuthPort

__all__ = [
    "AccountRepositoryPort",
    "CodeGenerationPort",
    "ConversionRepositoryPort",
    "PaymentGatewayPort",
    "PurchaseRepositoryPort",
    "UserAuthPort",
]
