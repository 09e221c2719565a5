"""Logging setup for the card service."""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mmcard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again only updates the level, so app reloads and test imports
    do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not getattr(logger, "_mmcard_configured", False):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = True
        logger._mmcard_configured = True  # type: ignore[attr-defined]
    return logger
