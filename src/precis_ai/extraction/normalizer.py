from __future__ import annotations

import logging

from precis_ai.errors import EmptyContentError

logger = logging.getLogger(__name__)

MAX_PROMPT_CHARS = 180_000
PREVIEW_CHARS = 100_000


def is_blank(text: str) -> bool:
    """True when nothing but whitespace was extracted."""
    return not text.strip()


def bound_text(text: str, max_chars: int = MAX_PROMPT_CHARS) -> str:
    """Keep the first `max_chars` characters; anything beyond is dropped."""
    if len(text) <= max_chars:
        return text
    logger.info("Truncating extracted text from %s to %s characters", len(text), max_chars)
    return text[:max_chars]


def prepare_text(text: str, max_chars: int = MAX_PROMPT_CHARS) -> str:
    """
    Validate extracted text and bound it for the outbound prompt.

    Whitespace is only trimmed to test for emptiness; the returned text keeps it.
    Raises `EmptyContentError` for blank input so no remote call is spent on it.
    """
    if is_blank(text):
        raise EmptyContentError()
    return bound_text(text, max_chars)


def preview_text(text: str, limit: int = PREVIEW_CHARS) -> str:
    return text[:limit]
