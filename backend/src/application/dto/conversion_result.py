"""DTO for wireframe conversion results."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from backend.src.core.value_objects.generated_code import GeneratedCode
from backend.src.core.value_objects.quality_score import QualityScore


@dataclass
class ConversionResult:
    conversion_id: str
    code: GeneratedCode
    quality: QualityScore
    credits_remaining: int
    format: str = "html"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.conversion_id,
            "html": self.code.html,
            "css": self.code.css,
            "js": self.code.js,
            "react": self.code.react,
            "json": self.code.structure or self.code.to_dict(),
            "format": self.format,
            "placeholder": self.code.is_placeholder,
            "quality": self.quality.to_dict(),
            "credits": self.credits_remaining,
        }
