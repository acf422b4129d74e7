"""Port for conversion history persistence."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.entities.conversion import Conversion


@runtime_checkable
class ConversionRepositoryPort(Protocol):
    async def save(self, conversion: Conversion) -> Conversion: ...
    async def list_by_user(self, user_id: str, limit: int = 50) -> list[Conversion]: ...
