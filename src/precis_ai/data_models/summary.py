from __future__ import annotations

from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SummaryResult(BaseModel):
    """Summary text plus key points, in presentation order."""

    model_config = ConfigDict(frozen=True)

    summary: str = ""
    key_points: List[str] = Field(default_factory=list)


class StructuredSummary(BaseModel):
    """The model replied with a JSON object that could be parsed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    result: SummaryResult
    raw_text: str = ""

    def to_result(self) -> SummaryResult:
        return self.result


class FallbackSummary(BaseModel):
    """The reply held no parseable JSON; the raw text becomes the summary."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fallback"] = "fallback"
    raw_text: str

    def to_result(self) -> SummaryResult:
        return SummaryResult(summary=self.raw_text, key_points=[])


DecodedSummary = Union[StructuredSummary, FallbackSummary]
