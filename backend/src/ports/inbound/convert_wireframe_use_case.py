"""Inbound port for wireframe conversion."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.application.dto.convert_request import ConvertRequest
    from backend.src.application.dto.conversion_result import ConversionResult
    from backend.src.core.entities.conversion import Conversion
    from backend.src.core.entities.user import User


@runtime_checkable
class ConvertWireframeUseCase(Protocol):
    async def convert(self, user: User, request: ConvertRequest) -> ConversionResult: ...
    async def history(self, user_id: str) -> list[Conversion]: ...
