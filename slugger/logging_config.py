"""
Slugger logging configuration.

This module provides unified logging configuration for the slugger package.
Every module obtains the same "slugger" logger through setup_logging().
"""
import logging
import sys

from slugger.config import settings


def setup_logging() -> logging.Logger:
    """
    Configure and return the package logger.

    The logger outputs to stdout with a structured format including:
    - Timestamp
    - Logger name
    - Log level
    - Message

    The level comes from the LOG_LEVEL setting.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger("slugger")
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Prevent duplicate handlers if called multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)

        # Structured log format
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
