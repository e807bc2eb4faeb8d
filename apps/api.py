"""FastAPI application exposing the summarisation pipeline as a REST API."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from precis_ai.data_models import SubmittedFile
from precis_ai.pipeline import SummarizationPipeline
from precis_ai.state import RunStatus

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[str, int] = {
    "ConfigurationError": 500,
    "ExtractionError": 400,
    "EmptyContentError": 422,
    "RemoteServiceError": 502,
}


@lru_cache(maxsize=1)
def _get_pipeline_singleton() -> SummarizationPipeline:
    """Create the shared pipeline from the default configuration."""
    logger.info("Initializing SummarizationPipeline for FastAPI service")
    return SummarizationPipeline.from_config(os.getenv("PRECIS_CONFIG_PATH"))


async def get_pipeline() -> SummarizationPipeline:
    """FastAPI dependency that returns the shared pipeline."""
    return _get_pipeline_singleton()


class SummaryResponse(BaseModel):
    summary: str
    key_points: List[str]
    degraded: bool = Field(False, description="True when the model reply was not valid JSON.")
    extracted_chars: int = 0
    file_name: Optional[str] = None


app = FastAPI(
    title="PrecisAI API",
    description="Summarise uploaded PDFs, images and text files with Gemini",
    version="0.1.0",
)

# Permissive CORS by default (override with API_ALLOW_ORIGINS)
allow_origins = os.getenv("API_ALLOW_ORIGINS", "*")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in allow_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", summary="Health check")
async def health() -> Dict[str, str]:
    """Return service health information."""
    return {"status": "ok"}


@app.post(
    "/summarise",
    response_model=SummaryResponse,
    summary="Summarise an uploaded document",
)
async def summarise_document(
    file: UploadFile = File(...),
    length: str = Form("medium"),
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SummaryResponse:
    """Extract text from the upload by its content type and summarise it."""
    submitted = SubmittedFile(
        name=file.filename or "upload",
        content=await file.read(),
        media_type=file.content_type,
    )
    run = await pipeline.arun(submitted, length)
    if run.status is not RunStatus.DONE:
        status_code = ERROR_STATUS.get(run.error_kind or "", 500)
        raise HTTPException(status_code=status_code, detail=run.error)

    return SummaryResponse(
        summary=run.result.summary,
        key_points=list(run.result.key_points),
        degraded=run.degraded,
        extracted_chars=len(run.extracted_text),
        file_name=run.file_name,
    )


if __name__ == "__main__":  # pragma: no cover - manual entry
    import uvicorn

    uvicorn.run("apps.api:app", host="127.0.0.1", port=int(os.getenv("PORT", "8000")), reload=True)
