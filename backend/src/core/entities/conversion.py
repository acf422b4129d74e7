"""Conversion entity - one wireframe-to-code run kept in a user's history."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

IMAGE_PREVIEW_CHARS = 100


def image_reference(image_base64: str, media_type: str = "image/jpeg") -> str:
    """Truncated data URL stored instead of the full upload."""
    return f"data:{media_type};base64,{image_base64[:IMAGE_PREVIEW_CHARS]}..."


@dataclass
class Conversion:
    user_id: str
    image_url: str = ""
    generated_code: str = ""
    format: str = "html"
    quality: Optional[dict] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "image_url": self.image_url,
            "generated_code": self.generated_code,
            "format": self.format,
            "quality": self.quality,
            "created_at": self.created_at.isoformat(),
        }
