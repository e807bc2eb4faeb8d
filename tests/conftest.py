"""Shared fixtures: in-memory PDFs and images plus a fake HTTP session for Gemini."""

from __future__ import annotations

import io
from typing import Any, Dict, List, Optional

import pytest

from precis_ai.config.schema import ModelConfig, Settings
from precis_ai.pipeline import SummarizationPipeline
from precis_ai.summarization import GeminiClient


def gemini_envelope(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Stands in for `requests.Session`, recording every POST."""

    def __init__(self, response: Optional[FakeResponse] = None):
        self.response = response or FakeResponse(
            payload=gemini_envelope('{"summary": "A short summary.", "key_points": ["one", "two"]}')
        )
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        return self.response


def make_pdf(pages: List[str]) -> bytes:
    """Build a PDF with one line of text per page."""
    import fitz

    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def make_png() -> bytes:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (32, 16), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(fake_session):
    return GeminiClient(ModelConfig(), api_key="test-key", session=fake_session)


@pytest.fixture
def pipeline(settings, client):
    return SummarizationPipeline(settings, client=client)
