from .dispatcher import ExtractorDispatcher, describe_file, extract_text
from .extractors import Extractor, OcrExtractor, PdfExtractor, TextExtractor, default_extractors
from .normalizer import MAX_PROMPT_CHARS, bound_text, is_blank, prepare_text, preview_text

__all__ = [
    "Extractor",
    "ExtractorDispatcher",
    "MAX_PROMPT_CHARS",
    "OcrExtractor",
    "PdfExtractor",
    "TextExtractor",
    "bound_text",
    "default_extractors",
    "describe_file",
    "extract_text",
    "is_blank",
    "prepare_text",
    "preview_text",
]
