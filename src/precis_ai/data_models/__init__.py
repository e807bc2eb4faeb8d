from .document import IMAGE_MEDIA_PREFIX, PDF_MEDIA_TYPE, SubmittedFile, SummaryLength
from .summary import DecodedSummary, FallbackSummary, StructuredSummary, SummaryResult

__all__ = [
    "DecodedSummary",
    "FallbackSummary",
    "IMAGE_MEDIA_PREFIX",
    "PDF_MEDIA_TYPE",
    "StructuredSummary",
    "SubmittedFile",
    "SummaryLength",
    "SummaryResult",
]
