from __future__ import annotations

from typing import Any, Dict

from precis_ai.data_models import SummaryLength
from precis_ai.extraction.normalizer import MAX_PROMPT_CHARS, bound_text

LENGTH_TARGETS: Dict[SummaryLength, str] = {
    SummaryLength.SHORT: "≈80-120 words",
    SummaryLength.MEDIUM: "≈150-250 words",
    SummaryLength.LONG: "≈300-450 words",
}

EMPTY_SUMMARY = "No readable content."

PROMPT_TEMPLATE = """
You are a document summariser. Respond ONLY as strict JSON:
{{"summary":"...", "key_points":["...","...","..."]}}

Rules:
- length: {target}
- concise & neutral
- keep names, numbers, definitions
- if input empty/garbled: {{"summary":"{empty_summary}", "key_points":[]}}

TEXT:
\"\"\"{text}\"\"\"
"""


def length_target(length: Any) -> str:
    """Word-count directive for `length`; unknown values get the medium range."""
    return LENGTH_TARGETS[SummaryLength.coerce(length)]


def build_prompt(text: str, length: Any = SummaryLength.MEDIUM, max_chars: int = MAX_PROMPT_CHARS) -> str:
    # The text sits between triple quotes and is not escaped.
    return PROMPT_TEMPLATE.format(
        target=length_target(length),
        empty_summary=EMPTY_SUMMARY,
        text=bound_text(text, max_chars),
    )
