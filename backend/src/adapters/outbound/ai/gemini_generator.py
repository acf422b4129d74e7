"""Adapter wrapping Google Gemini for the CodeGenerationPort.

Uses the google-genai SDK with a JSON response mime type, which keeps
the reply parseable far more often than free-form text.
"""
from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import time
from typing import Any, Optional

from backend.src.adapters.outbound.ai.prompts import SYSTEM_PROMPT, USER_PROMPT, parse_generated_code
from backend.src.core.exceptions import CodeGenerationError
from backend.src.core.value_objects.generated_code import GeneratedCode

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
INITIAL_BACKOFF = 2.0


class GeminiCodeGenerator:
    """Implements CodeGenerationPort by calling the Gemini API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        client: Optional[Any] = None,
    ) -> None:
        if not api_key and client is None:
            raise ValueError(
                "GEMINI_API_KEY is required when GENERATOR_BACKEND=gemini. "
                "Get one at https://aistudio.google.com/apikey"
            )
        self._model = model
        if client is None:
            from google import genai
            client = genai.Client(api_key=api_key)
        self._client = client
        logger.info("GeminiCodeGenerator initialised (model=%s)", self._model)

    async def generate(self, image_base64: str, media_type: str = "image/jpeg") -> GeneratedCode:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._generate_sync, image_base64, media_type)

    def test_connection(self) -> bool:
        try:
            from google.genai import types
            self._client.models.generate_content(
                model=self._model,
                contents="ping",
                config=types.GenerateContentConfig(max_output_tokens=5),
            )
            logger.info("Gemini connection successful")
            return True
        except Exception as exc:
            logger.error("Gemini connection failed: %s", exc)
            return False

    # ------------------------------------------------------------------

    def _generate_sync(self, image_base64: str, media_type: str) -> GeneratedCode:
        from google.genai import types

        try:
            image_bytes = base64.b64decode(image_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("Image is not valid base64") from exc

        contents = [
            types.Part.from_bytes(data=image_bytes, mime_type=media_type),
            USER_PROMPT,
        ]
        config = types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            response_mime_type="application/json",
            temperature=0.2,
        )

        last_exc: Exception | None = None
        for attempt in range(MAX_RETRIES):
            try:
                response = self._client.models.generate_content(
                    model=self._model,
                    contents=contents,
                    config=config,
                )
                return parse_generated_code(response.text)
            except Exception as exc:
                last_exc = exc
                if attempt == MAX_RETRIES - 1:
                    break
                backoff = INITIAL_BACKOFF * (2 ** attempt)
                logger.warning(
                    "Gemini request attempt %d/%d failed (%s), retrying in %.1fs",
                    attempt + 1, MAX_RETRIES, exc, backoff,
                )
                time.sleep(backoff)
        raise CodeGenerationError(f"Conversion failed after {MAX_RETRIES} attempts: {last_exc}") from last_exc
