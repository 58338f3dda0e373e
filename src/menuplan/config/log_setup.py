"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: str = "WARNING", fmt: Optional[str] = None) -> None:
    """Configure logging for the menuplan loggers.

    Args:
        level: Level name such as "DEBUG" or "WARNING"
        fmt: Log record format; uses the logging default if None
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if fmt:
        logging.basicConfig(level=numeric_level, format=fmt)
    else:
        logging.basicConfig(level=numeric_level)
    logging.getLogger("menuplan").setLevel(numeric_level)
