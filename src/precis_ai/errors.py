"""Exceptions raised by the extraction and summarization pipeline.

Every error carries a message that can be shown to the user as-is; the CLI and
HTTP surfaces print ``str(exc)`` and nothing else.
"""

from __future__ import annotations

from typing import Optional


class PrecisError(Exception):
    """Base class for failures that abort a summarization run."""


class ConfigurationError(PrecisError):
    """Raised when the Gemini API key is missing."""


class ExtractionError(PrecisError):
    """Raised when an extraction engine cannot process the submitted bytes."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.file_name = file_name


class EmptyContentError(PrecisError):
    """Raised when extraction produced no readable text."""

    def __init__(
        self,
        message: str = "Could not extract any text from the document. It might be empty or unreadable.",
    ):
        super().__init__(message)


class RemoteServiceError(PrecisError):
    """Raised when the model endpoint answers with a non-success status.

    `status_code` is None when the request never got a response.
    """

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        super().__init__(message or f"Gemini error {status_code}")
        self.status_code = status_code


class InvalidTransitionError(PrecisError):
    """Raised when a run is moved to a state it cannot reach from its current one."""
