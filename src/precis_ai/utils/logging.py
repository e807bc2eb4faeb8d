from __future__ import annotations

import logging
from typing import Optional

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Initialize Python logging and structlog with consistent formatting.

    Swaps between console and JSON renderers and filters structlog loggers at the
    requested level.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level)
    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def run_logger(file_name: Optional[str], length: Optional[str] = None):
    """Return a structlog logger carrying the file name and length of one summarisation run."""
    return structlog.get_logger("precis_ai.pipeline").bind(file_name=file_name, length=length)
