"""
Wireframe-to-code conversion use case.
"""
from __future__ import annotations

import logging
from typing import Optional

from backend.src.application.credit_service import CreditService
from backend.src.application.dto.conversion_result import ConversionResult
from backend.src.application.dto.convert_request import ConvertRequest
from backend.src.core.entities.conversion import Conversion, image_reference
from backend.src.core.entities.user import User
from backend.src.core.exceptions import InsufficientCreditsError
from backend.src.core.services.code_quality import CodeQualityAnalyzer

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


class ConversionService:
    """Charges one credit per generated artifact and keeps a history."""

    def __init__(
        self,
        generator,     # CodeGenerationPort
        credits: CreditService,
        conversions,   # ConversionRepositoryPort
        analyzer: Optional[CodeQualityAnalyzer] = None,
        history_limit: int = HISTORY_LIMIT,
    ):
        self._generator = generator
        self._credits = credits
        self._conversions = conversions
        self._analyzer = analyzer or CodeQualityAnalyzer()
        self._history_limit = history_limit

    async def convert(self, user: User, request: ConvertRequest) -> ConversionResult:
        account = await self._credits.get_or_create_account(user.id, user.email)
        if not account.can_convert:
            raise InsufficientCreditsError(user.id, account.credits)

        if not request.image:
            raise ValueError("No image provided")

        logger.info("Converting wireframe for %s (format=%s)", user.id, request.format)
        # Generation errors propagate before any credit is charged.
        code = await self._generator.generate(request.image, request.media_type)
        if code.is_placeholder:
            logger.warning("Model reply for %s was not parseable, using placeholder", user.id)

        account = await self._credits.deduct_credit(user.id)

        quality = self._analyzer.analyze(code.html, code.css, code.js)
        conversion = Conversion(
            user_id=user.id,
            image_url=image_reference(request.image, request.media_type),
            generated_code=code.to_json(),
            format=request.format,
            quality=quality.to_dict(),
        )
        await self._conversions.save(conversion)
        logger.info(
            "Conversion %s done: grade=%s overall=%d credits_left=%d",
            conversion.id, quality.grade.value, quality.overall, account.credits,
        )

        return ConversionResult(
            conversion_id=conversion.id,
            code=code,
            quality=quality,
            credits_remaining=account.credits,
            format=request.format,
        )

    async def history(self, user_id: str) -> list[Conversion]:
        return await self._conversions.list_by_user(user_id, limit=self._history_limit)
