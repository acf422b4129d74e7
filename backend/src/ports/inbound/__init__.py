from backend.src.ports.inbound.convert_wireframe_use_case import ConvertWireframeUseCase
from backend.src.ports.inbound.purchase_credits_use_case import PurchaseCreditsUseCase

__all__ = [
    "ConvertWireframeUseCase",
    "PurchaseCreditsUseCase",
]
