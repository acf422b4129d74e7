"""Port for vision-model generation of website code from a wireframe image."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.value_objects.generated_code import GeneratedCode


@runtime_checkable
class CodeGenerationPort(Protocol):
    async def generate(self, image_base64: str, media_type: str = "image/jpeg") -> GeneratedCode: ...
    def test_connection(self) -> bool: ...
