"""
PrecisAI document summariser.

Extracts text from PDFs (PyMuPDF), images (Tesseract OCR) or plain-text files and
asks a hosted Gemini model for a summary with key points.
"""

from .config.loader import load_settings
from .data_models import SubmittedFile, SummaryLength, SummaryResult
from .pipeline import SummarizationPipeline

__all__ = ["SubmittedFile", "SummarizationPipeline", "SummaryLength", "SummaryResult", "load_settings"]
