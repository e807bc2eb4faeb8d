"""Best-effort decoding of free-form model replies.

Models often wrap their JSON in prose or code fences, so the reply is scanned for
the span from the first ``{`` to the last ``}`` and only that span is parsed.
Anything that cannot be parsed degrades to a `FallbackSummary` holding the raw
reply; decoding never raises.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from precis_ai.data_models import DecodedSummary, FallbackSummary, StructuredSummary, SummaryResult

logger = logging.getLogger(__name__)

JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def extract_reply_text(envelope: Any) -> str:
    """Pull `candidates[0].content.parts[0].text` out of a generateContent response."""
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def find_json_object(raw: str) -> Optional[str]:
    match = JSON_OBJECT_PATTERN.search(raw)
    return match.group(0) if match else None


def _coerce_key_points(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value]


def _coerce_result(payload: Dict[str, Any]) -> SummaryResult:
    summary = payload.get("summary")
    if summary is None:
        summary = ""
    elif not isinstance(summary, str):
        summary = str(summary)
    return SummaryResult(summary=summary, key_points=_coerce_key_points(payload.get("key_points")))


def decode_reply(raw: str) -> DecodedSummary:
    candidate = find_json_object(raw)
    if candidate is None:
        return FallbackSummary(raw_text=raw)
    try:
        payload = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        # ValueError covers JSONDecodeError and the int digit limit; RecursionError deep nesting.
        logger.debug("Unable to parse model reply as JSON (%s): %s", exc.__class__.__name__, candidate[:200])
        return FallbackSummary(raw_text=raw)
    if not isinstance(payload, dict):
        return FallbackSummary(raw_text=raw)
    return StructuredSummary(result=_coerce_result(payload), raw_text=raw)
