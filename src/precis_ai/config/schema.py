from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, validator


class ModelConfig(BaseModel):
    """Settings for the hosted Gemini model used to write summaries."""

    name: str = Field("gemini-2.0-flash", description="Gemini model identifier.")
    base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta",
        description="Root of the generativelanguage REST API.",
    )
    temperature: float = Field(0.3, ge=0, le=2)
    api_key: Optional[str] = Field(
        None, description="Optional key; GEMINI_API_KEY is used when unset."
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Request timeout in seconds; None keeps the transport default."
    )

    @validator("base_url")
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so endpoint paths can be appended directly."""
        return value.rstrip("/")


class ExtractionConfig(BaseModel):
    """Controls for text acquisition and the bound applied before prompting."""

    max_chars: int = Field(180_000, ge=1)
    ocr_language: str = Field("eng", description="Tesseract language code.")
    preview_chars: int = Field(100_000, ge=0)


class LoggingConfig(BaseModel):
    """Controls for log level and format."""

    level: str = Field("INFO")
    use_json: bool = False


class Settings(BaseModel):
    """Top-level project configuration aggregating all sub-settings."""

    project_name: str = Field("PrecisAI")
    model: ModelConfig = Field(default_factory=ModelConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
