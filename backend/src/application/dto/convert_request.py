"""DTO for wireframe conversion requests."""
from __future__ import annotations
from dataclasses import dataclass

SUPPORTED_FORMATS = ("html", "react", "json")


@dataclass
class ConvertRequest:
    image: str
    format: str = "html"
    media_type: str = "image/jpeg"

    def __post_init__(self) -> None:
        # Accept full data URLs as well as bare base64 payloads.
        if self.image and self.image.startswith("data:") and "," in self.image:
            header, self.image = self.image.split(",", 1)
            self.media_type = header[len("data:"):].split(";", 1)[0] or self.media_type
        self.format = (self.format or "html").lower()
