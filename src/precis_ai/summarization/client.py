from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import requests

from precis_ai.config.schema import ModelConfig
from precis_ai.data_models import DecodedSummary, SummaryLength, SummaryResult
from precis_ai.errors import ConfigurationError, RemoteServiceError
from precis_ai.extraction.normalizer import MAX_PROMPT_CHARS
from precis_ai.summarization.decoding import decode_reply, extract_reply_text
from precis_ai.summarization.prompt import build_prompt

logger = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"


class GeminiClient:
    """Single-shot summarisation through the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        config: Optional[ModelConfig] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        max_chars: int = MAX_PROMPT_CHARS,
    ):
        self.config = config or ModelConfig()
        # Read once; a missing key only fails when a summary is requested.
        self.api_key = api_key or self.config.api_key or os.getenv(API_KEY_ENV)
        self.session = session or requests.Session()
        self.max_chars = max_chars

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url}/models/{self.config.name}:generateContent"

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(f"Missing {API_KEY_ENV}. Set it in the environment or .env file.")
        return self.api_key

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": self.config.temperature},
        }

    def generate(self, prompt: str) -> str:
        """POST the prompt once and return the model's raw reply text."""
        key = self.require_api_key()
        try:
            response = self.session.post(
                self.endpoint,
                params={"key": key},
                json=self.build_payload(prompt),
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteServiceError(None, f"Could not reach Gemini: {exc}") from exc

        if not response.ok:
            logger.warning("Gemini request failed with status %s", response.status_code)
            raise RemoteServiceError(response.status_code)

        try:
            envelope = response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body")
            envelope = {}
        return extract_reply_text(envelope)

    def summarise_decoded(self, text: str, length: Any = SummaryLength.MEDIUM) -> DecodedSummary:
        self.require_api_key()
        prompt = build_prompt(text, length, max_chars=self.max_chars)
        raw = self.generate(prompt)
        decoded = decode_reply(raw)
        if decoded.kind == "fallback":
            logger.info("Model reply was not JSON; using raw text as the summary")
        return decoded

    def summarise(self, text: str, length: Any = SummaryLength.MEDIUM) -> SummaryResult:
        """
        Summarise `text` at the requested length.

        Raises `ConfigurationError` without touching the network when no API key is
        configured, and `RemoteServiceError` for a non-success response. Replies that
        are not valid JSON come back as the raw text with no key points.
        """
        return self.summarise_decoded(text, length).to_result()
