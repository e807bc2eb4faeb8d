from .files import guess_media_type, load_submitted_file
from .formatting import result_to_markdown, share_text, share_title
from .logging import configure_logging, run_logger

__all__ = [
    "configure_logging",
    "guess_media_type",
    "load_submitted_file",
    "result_to_markdown",
    "run_logger",
    "share_text",
    "share_title",
]
