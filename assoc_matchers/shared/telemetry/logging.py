"""Logging configuration for the matchers."""

import logging
import sys

from assoc_matchers.core.config import get_settings


def setup_logging() -> None:
    """Configure logging for matcher diagnostics.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout so pytest captures it alongside the test.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
