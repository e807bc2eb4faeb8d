from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from precis_ai.data_models import SubmittedFile
from precis_ai.extraction.extractors import Extractor, TextExtractor, default_extractors

logger = logging.getLogger(__name__)

NO_FILE_HINT = "Drop any document to get started, or choose a file."
PDF_HINT = "PDF detected — we’ll parse its text."
IMAGE_HINT = "Image detected — we’ll run OCR."
TEXT_HINT = "Text/other file — we’ll read its contents."


class ExtractorDispatcher:
    """
    Route a submitted file to exactly one extractor by its declared media type.

    Extractors are consulted in order and the first match wins. Routing trusts the
    declared type and never inspects the bytes, so a mislabelled file goes to the
    wrong extractor. A `TextExtractor` is appended when the supplied list has no
    catch-all, which keeps routing total.
    """

    def __init__(self, extractors: Optional[Sequence[Extractor]] = None, ocr_language: str = "eng"):
        chosen: List[Extractor] = list(extractors) if extractors is not None else default_extractors(ocr_language)
        if not chosen or not isinstance(chosen[-1], TextExtractor):
            chosen.append(TextExtractor())
        self.extractors = chosen

    def select(self, media_type: Optional[str]) -> Extractor:
        for extractor in self.extractors:
            if extractor.matches(media_type):
                return extractor
        return self.extractors[-1]

    def extract(self, file: SubmittedFile) -> str:
        extractor = self.select(file.media_type)
        logger.info(
            "Extracting %s (%s, %s bytes) with %s",
            file.name,
            file.media_type or "unknown type",
            file.size,
            extractor.__class__.__name__,
        )
        return extractor.extract(file)


def extract_text(file: SubmittedFile, ocr_language: str = "eng") -> str:
    """Extract all recoverable text from `file` with the default extractors."""
    return ExtractorDispatcher(ocr_language=ocr_language).extract(file)


def describe_file(file: Optional[SubmittedFile]) -> str:
    """Return the hint telling the user how a selected file will be read."""
    if file is None:
        return NO_FILE_HINT
    if file.is_pdf:
        return PDF_HINT
    if file.is_image:
        return IMAGE_HINT
    return TEXT_HINT
