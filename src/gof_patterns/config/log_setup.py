from __future__ import annotations

import logging
from typing import Optional

from .settings import DEFAULT_LOG_FORMAT

__all__ = ["configure_logging", "LOGGER_NAME"]

LOGGER_NAME = "gof_patterns"


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Logger:
    """Configure root logging and return the package logger.

    Records go to standard error so they never interleave with the
    demonstration output on standard output.
    """
    logging.basicConfig(level=level, format=fmt or DEFAULT_LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
