from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

from precis_ai.config import Settings, load_settings
from precis_ai.data_models import SubmittedFile, SummaryLength
from precis_ai.errors import PrecisError
from precis_ai.extraction import ExtractorDispatcher, prepare_text
from precis_ai.state import (
    SummaryRun,
    complete_run,
    fail_run,
    mark_summarizing,
    start_run,
)
from precis_ai.summarization import GeminiClient
from precis_ai.utils.logging import configure_logging, run_logger

UNEXPECTED_ERROR_MESSAGE = "Something went wrong."

TransitionCallback = Callable[[SummaryRun], None]


class SummarizationPipeline:
    """
    Extract text from one submitted file and summarise it with Gemini.

    Each call to `run` is independent: extraction strictly precedes the single
    remote call, and the only shared state is the configuration read at
    construction. Failures end the run in the ``failed`` state with a message the
    user can read; a run never carries both a result and an error.

    Attributes
    ----------
    settings : Settings
        Loaded configuration (model, extraction bound, OCR language, logging).
    dispatcher : ExtractorDispatcher
        Media-type router choosing PDF, OCR, or plain-text extraction.
    client : GeminiClient
        REST client issuing the generateContent call.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        dispatcher: Optional[ExtractorDispatcher] = None,
        client: Optional[GeminiClient] = None,
        api_key: Optional[str] = None,
    ):
        self.settings = settings or Settings()
        self.dispatcher = dispatcher or ExtractorDispatcher(
            ocr_language=self.settings.extraction.ocr_language
        )
        self.client = client or GeminiClient(
            self.settings.model,
            api_key=api_key,
            max_chars=self.settings.extraction.max_chars,
        )

    @classmethod
    def from_config(
        cls, config_path: Optional[str | Path] = None, api_key: Optional[str] = None
    ) -> "SummarizationPipeline":
        settings = load_settings(config_path)
        configure_logging(settings.logging.level, settings.logging.use_json)
        return cls(settings, api_key=api_key)

    def run(
        self,
        file: SubmittedFile,
        length: Any = SummaryLength.MEDIUM,
        on_transition: Optional[TransitionCallback] = None,
    ) -> SummaryRun:
        """Run extraction then summarisation for `file`, returning the final run state."""
        run = self._advance(start_run(SummaryRun(), file.name, length), on_transition)
        try:
            text = self.dispatcher.extract(file)
        except Exception as exc:  # noqa: BLE001
            return self._fail(run, exc, on_transition)
        return self._summarise(run, text, on_transition)

    async def arun(
        self,
        file: SubmittedFile,
        length: Any = SummaryLength.MEDIUM,
        on_transition: Optional[TransitionCallback] = None,
    ) -> SummaryRun:
        """Same as `run`, suspending on a worker thread for extraction and the remote call."""
        run = self._advance(start_run(SummaryRun(), file.name, length), on_transition)
        try:
            text = await asyncio.to_thread(self.dispatcher.extract, file)
        except Exception as exc:  # noqa: BLE001
            return self._fail(run, exc, on_transition)
        return await asyncio.to_thread(self._summarise, run, text, on_transition)

    def _summarise(
        self, run: SummaryRun, text: str, on_transition: Optional[TransitionCallback]
    ) -> SummaryRun:
        try:
            bounded = prepare_text(text, self.settings.extraction.max_chars)
        except Exception as exc:  # noqa: BLE001
            return self._fail(run, exc, on_transition, extracted_text=text)

        run = self._advance(mark_summarizing(run, text), on_transition)
        try:
            decoded = self.client.summarise_decoded(bounded, run.length)
        except Exception as exc:  # noqa: BLE001
            return self._fail(run, exc, on_transition)

        run_logger(run.file_name, run.length.value).info(
            "run_completed", decoded=decoded.kind, extracted_chars=len(text)
        )
        return self._advance(
            complete_run(run, decoded.to_result(), degraded=decoded.kind == "fallback"),
            on_transition,
        )

    def _fail(
        self,
        run: SummaryRun,
        exc: Exception,
        on_transition: Optional[TransitionCallback],
        extracted_text: Optional[str] = None,
    ) -> SummaryRun:
        log = run_logger(run.file_name, run.length.value)
        if isinstance(exc, PrecisError):
            log.warning("run_failed", error_kind=exc.__class__.__name__, error=str(exc))
            message = str(exc)
        else:
            # Unexpected failures still end the run with a displayable message.
            log.exception("run_crashed", error_kind=exc.__class__.__name__)
            message = UNEXPECTED_ERROR_MESSAGE
        return self._advance(
            fail_run(run, message, extracted_text, error_kind=exc.__class__.__name__),
            on_transition,
        )

    @staticmethod
    def _advance(run: SummaryRun, on_transition: Optional[TransitionCallback]) -> SummaryRun:
        if on_transition:
            on_transition(run)
        return run
