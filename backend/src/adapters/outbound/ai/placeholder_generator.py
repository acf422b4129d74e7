"""Development code generator - no model call, always the placeholder site."""
from __future__ import annotations

import logging

from backend.src.core.value_objects.generated_code import GeneratedCode

logger = logging.getLogger(__name__)


class PlaceholderCodeGenerator:
    async def generate(self, image_base64: str, media_type: str = "image/jpeg") -> GeneratedCode:
        logger.debug("PlaceholderCodeGenerator: returning fallback artifact")
        return GeneratedCode.placeholder()

    def test_connection(self) -> bool:
        return True
