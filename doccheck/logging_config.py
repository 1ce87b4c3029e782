"""Centralized logging configuration for doccheck."""

import logging
import sys

# Handler installed by the last setup_logging() call
_HANDLER: logging.Handler | None = None


def setup_logging(level: int = logging.WARNING, format_string: str | None = None) -> None:
    """Configure logging for a doccheck run.

    Records go to stderr only; a run keeps no state on disk.

    Args:
        level: Logging level for the ``doccheck`` logger (default WARNING)
        format_string: Optional custom format string
    """
    global _HANDLER
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger("doccheck")
    logger.setLevel(level)

    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler(sys.stderr)
    _HANDLER.setFormatter(logging.Formatter(format_string))
    logger.addHandler(_HANDLER)

    # Suppress noisy third-party loggers
    logging.getLogger("markdown_it").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"doccheck.{name}")
