from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

PDF_MEDIA_TYPE = "application/pdf"
IMAGE_MEDIA_PREFIX = "image/"


class SubmittedFile(BaseModel):
    """User-provided file as received from an upload or a local path."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: bytes = Field(repr=False)
    media_type: Optional[str] = Field(
        default=None, description="Declared media type; trusted as-is for routing."
    )

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MEDIA_TYPE

    @property
    def is_image(self) -> bool:
        return bool(self.media_type) and self.media_type.startswith(IMAGE_MEDIA_PREFIX)


class SummaryLength(str, Enum):
    """Target size of the generated summary."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def coerce(cls, value: Any) -> "SummaryLength":
        """Map arbitrary input to a length, falling back to medium for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM
