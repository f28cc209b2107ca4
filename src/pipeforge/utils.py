"""Utility functions for pipeforge."""

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """Route pipeforge logging to stderr at ``level``.

    Replaces loguru's default sink so repeated calls do not stack handlers.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.debug(f"Logging configured at level {level.upper()}")
