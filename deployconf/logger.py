"""Logging configuration for deployconf."""

import logging
import os
import sys
from typing import Optional


def setup_logger(name: str = "deployconf", level: Optional[str] = None) -> logging.Logger:
    """Setup and configure the package logger with a console handler."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    ))
    logger.addHandler(console_handler)

    return logger
