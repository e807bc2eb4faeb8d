from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from precis_ai.data_models import IMAGE_MEDIA_PREFIX, PDF_MEDIA_TYPE, SubmittedFile
from precis_ai.errors import ExtractionError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"
FRAGMENT_SEPARATOR = " "


class Extractor(ABC):
    """Abstract base for turning submitted bytes into plain text."""

    kind: str = ""

    @abstractmethod
    def matches(self, media_type: Optional[str]) -> bool:
        raise NotImplementedError

    @abstractmethod
    def extract(self, file: SubmittedFile) -> str:
        raise NotImplementedError


class PdfExtractor(Extractor):
    """Page-ordered text extraction through PyMuPDF."""

    kind = "pdf"

    def matches(self, media_type: Optional[str]) -> bool:
        return media_type == PDF_MEDIA_TYPE

    def extract(self, file: SubmittedFile) -> str:
        try:
            import fitz  # type: ignore
        except ImportError as exc:
            raise ExtractionError(
                "pymupdf is required to parse PDF files. Install pymupdf.", file.name
            ) from exc

        try:
            with fitz.open(stream=file.content, filetype="pdf") as doc:
                pages = [self.page_text(page) for page in doc]
        except Exception as exc:  # noqa: BLE001
            raise ExtractionError(f"Could not read PDF {file.name}: {exc}", file.name) from exc

        logger.debug("Extracted %s pages from %s", len(pages), file.name)
        return PAGE_SEPARATOR.join(pages)

    @staticmethod
    def page_fragments(page) -> List[str]:
        """Return the page's text fragments in PyMuPDF reading order."""
        return [word[4] for word in page.get_text("words")]

    def page_text(self, page) -> str:
        return FRAGMENT_SEPARATOR.join(self.page_fragments(page))


class OcrExtractor(Extractor):
    """Single-pass Tesseract recognition with a fixed language."""

    kind = "ocr"

    def __init__(self, language: str = "eng"):
        self.language = language

    def matches(self, media_type: Optional[str]) -> bool:
        return bool(media_type) and media_type.startswith(IMAGE_MEDIA_PREFIX)

    def extract(self, file: SubmittedFile) -> str:
        try:
            import pytesseract  # type: ignore
            from PIL import Image
        except ImportError as exc:
            raise ExtractionError(
                "pytesseract and Pillow are required for image OCR. Install them.", file.name
            ) from exc

        try:
            with Image.open(io.BytesIO(file.content)) as image:
                text = pytesseract.image_to_string(image, lang=self.language)
        except Exception as exc:  # noqa: BLE001
            raise ExtractionError(f"Could not run OCR on {file.name}: {exc}", file.name) from exc
        return text or ""


class TextExtractor(Extractor):
    """Fallback for everything else: decode the bytes as UTF-8 text."""

    kind = "text"

    def matches(self, media_type: Optional[str]) -> bool:
        return True

    def extract(self, file: SubmittedFile) -> str:
        return file.content.decode("utf-8", errors="replace")


def default_extractors(ocr_language: str = "eng") -> List[Extractor]:
    """Extractors in routing priority order; the last one accepts any media type."""
    return [PdfExtractor(), OcrExtractor(language=ocr_language), TextExtractor()]
