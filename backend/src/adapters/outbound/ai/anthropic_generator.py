"""Adapter wrapping the Anthropic Messages API for the CodeGenerationPort.

Sends the wireframe as a base64 image block alongside the conversion
instructions and parses the JSON object out of the text reply.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional

import anthropic

from backend.src.adapters.outbound.ai.prompts import SYSTEM_PROMPT, USER_PROMPT, parse_generated_code
from backend.src.core.exceptions import CodeGenerationError
from backend.src.core.value_objects.generated_code import GeneratedCode

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
INITIAL_BACKOFF = 2.0

_RETRYABLE = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


class AnthropicCodeGenerator:
    """Implements CodeGenerationPort with a Claude vision model."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 8000,
        timeout: int = 120,
        client: Optional[Any] = None,
    ) -> None:
        if not api_key and client is None:
            raise ValueError("ANTHROPIC_API_KEY is required when GENERATOR_BACKEND=anthropic.")
        self._model = model
        self._max_tokens = max_tokens
        self._client = client or anthropic.Anthropic(api_key=api_key, timeout=timeout)
        logger.info("AnthropicCodeGenerator initialised (model=%s)", self._model)

    async def generate(self, image_base64: str, media_type: str = "image/jpeg") -> GeneratedCode:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._generate_sync, image_base64, media_type)

    def test_connection(self) -> bool:
        try:
            self._client.messages.create(
                model=self._model,
                max_tokens=5,
                messages=[{"role": "user", "content": "ping"}],
            )
            logger.info("Anthropic connection successful")
            return True
        except Exception as exc:
            logger.error("Anthropic connection failed: %s", exc)
            return False

    # ------------------------------------------------------------------

    def _generate_sync(self, image_base64: str, media_type: str) -> GeneratedCode:
        response = self._create_with_retry(image_base64, media_type)
        text = "".join(
            getattr(block, "text", "")
            for block in getattr(response, "content", [])
            if getattr(block, "type", None) == "text"
        )
        if not text:
            raise CodeGenerationError("No text response from AI")
        return parse_generated_code(text)

    def _create_with_retry(self, image_base64: str, media_type: str) -> Any:
        last_exc: Exception | None = None
        for attempt in range(MAX_RETRIES):
            try:
                return self._client.messages.create(
                    model=self._model,
                    max_tokens=self._max_tokens,
                    system=SYSTEM_PROMPT,
                    messages=[
                        {
                            "role": "user",
                            "content": [
                                {
                                    "type": "image",
                                    "source": {
                                        "type": "base64",
                                        "media_type": media_type,
                                        "data": image_base64,
                                    },
                                },
                                {"type": "text", "text": USER_PROMPT},
                            ],
                        }
                    ],
                )
            except _RETRYABLE as exc:
                last_exc = exc
                if attempt == MAX_RETRIES - 1:
                    break
                backoff = INITIAL_BACKOFF * (2 ** attempt)
                logger.warning(
                    "Anthropic request attempt %d/%d failed (%s), retrying in %.1fs",
                    attempt + 1, MAX_RETRIES, exc, backoff,
                )
                time.sleep(backoff)
            except anthropic.APIError as exc:
                raise CodeGenerationError(f"Conversion failed: {exc}") from exc
        raise CodeGenerationError(f"Conversion failed after {MAX_RETRIES} attempts: {last_exc}") from last_exc
