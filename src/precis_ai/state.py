"""Immutable run state for one file submission.

A run moves ``idle -> extracting -> summarizing -> done`` and may drop to
``failed`` from either in-flight state. Finished runs can be restarted. Each
transition returns a new `SummaryRun`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from precis_ai.data_models import SummaryLength, SummaryResult
from precis_ai.errors import InvalidTransitionError


class RunStatus(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    SUMMARIZING = "summarizing"
    DONE = "done"
    FAILED = "failed"


IN_FLIGHT = {RunStatus.EXTRACTING, RunStatus.SUMMARIZING}
STARTABLE = {RunStatus.IDLE, RunStatus.DONE, RunStatus.FAILED}


class SummaryRun(BaseModel):
    """Snapshot of a summarisation run; holds a result or an error, never both."""

    model_config = ConfigDict(frozen=True)

    status: RunStatus = RunStatus.IDLE
    file_name: Optional[str] = None
    length: SummaryLength = SummaryLength.MEDIUM
    extracted_text: str = ""
    result: Optional[SummaryResult] = None
    degraded: bool = False
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.status in IN_FLIGHT

    @property
    def finished(self) -> bool:
        return self.status in (RunStatus.DONE, RunStatus.FAILED)


def _require(run: SummaryRun, allowed: set, target: RunStatus) -> None:
    if run.status not in allowed:
        raise InvalidTransitionError(f"Cannot move run from {run.status.value} to {target.value}")


def start_run(run: SummaryRun, file_name: str, length: Any = SummaryLength.MEDIUM) -> SummaryRun:
    _require(run, STARTABLE, RunStatus.EXTRACTING)
    return SummaryRun(
        status=RunStatus.EXTRACTING,
        file_name=file_name,
        length=SummaryLength.coerce(length),
    )


def mark_summarizing(run: SummaryRun, extracted_text: str) -> SummaryRun:
    _require(run, {RunStatus.EXTRACTING}, RunStatus.SUMMARIZING)
    return run.model_copy(update={"status": RunStatus.SUMMARIZING, "extracted_text": extracted_text})


def complete_run(run: SummaryRun, result: SummaryResult, degraded: bool = False) -> SummaryRun:
    _require(run, {RunStatus.SUMMARIZING}, RunStatus.DONE)
    return run.model_copy(update={"status": RunStatus.DONE, "result": result, "degraded": degraded})


def fail_run(
    run: SummaryRun,
    message: str,
    extracted_text: Optional[str] = None,
    error_kind: Optional[str] = None,
) -> SummaryRun:
    _require(run, IN_FLIGHT, RunStatus.FAILED)
    update = {
        "status": RunStatus.FAILED,
        "error": message or "Something went wrong.",
        "error_kind": error_kind,
        "result": None,
    }
    if extracted_text is not None:
        update["extracted_text"] = extracted_text
    return run.model_copy(update=update)

