"""Adapter calling a local Ollama vision model for the CodeGenerationPort."""
from __future__ import annotations

import asyncio
import logging
import time

import requests

from backend.src.adapters.outbound.ai.prompts import SYSTEM_PROMPT, USER_PROMPT, parse_generated_code
from backend.src.core.exceptions import CodeGenerationError
from backend.src.core.value_objects.generated_code import GeneratedCode

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
INITIAL_BACKOFF = 2.0  # seconds


class OllamaCodeGenerator:
    """Implements CodeGenerationPort against ``/api/generate`` on an Ollama server."""

    def __init__(self, base_url: str, model: str, timeout: int = 240) -> None:
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        logger.info("OllamaCodeGenerator initialised (model=%s, url=%s)", self._model, self._base_url)

    async def generate(self, image_base64: str, media_type: str = "image/jpeg") -> GeneratedCode:
        """The blocking HTTP call runs in a worker thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._generate_sync, image_base64)

    def test_connection(self) -> bool:
        try:
            resp = requests.get(f"{self._base_url}/api/tags", timeout=5)
            resp.raise_for_status()
            logger.info("Ollama connection successful")
            return True
        except Exception as exc:
            logger.error("Ollama connection failed: %s", exc)
            return False

    def _generate_sync(self, image_base64: str) -> GeneratedCode:
        try:
            response = self._request_with_retry(
                f"{self._base_url}/api/generate",
                {
                    "model": self._model,
                    "system": SYSTEM_PROMPT,
                    "prompt": USER_PROMPT,
                    "images": [image_base64],
                    "stream": False,
                    "format": "json",
                },
            )
        except requests.exceptions.RequestException as exc:
            raise CodeGenerationError(f"Conversion failed: {exc}") from exc
        return parse_generated_code(response.json().get("response", ""))

    def _request_with_retry(self, url: str, payload: dict) -> requests.Response:
        """POST with exponential backoff; 4xx responses are not retried."""
        last_exc: Exception | None = None
        for attempt in range(MAX_RETRIES):
            try:
                response = requests.post(url, json=payload, timeout=self._timeout)
                response.raise_for_status()
                return response
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as exc:
                last_exc = exc
            except requests.exceptions.HTTPError as exc:
                if exc.response is not None and 400 <= exc.response.status_code < 500:
                    raise
                last_exc = exc
            if attempt == MAX_RETRIES - 1:
                break
            backoff = INITIAL_BACKOFF * (2 ** attempt)
            logger.warning(
                "Ollama request attempt %d/%d failed (%s), retrying in %.1fs",
                attempt + 1, MAX_RETRIES, last_exc, backoff,
            )
            time.sleep(backoff)
        raise last_exc  # type: ignore[misc]
