"""Logging Utilities for the Recipe Book
=======================================

Centralized logging configuration and utilities.

Usage:
    from tools.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded 12 recipes")
    logger.warning("Skipping malformed row")

Standards:
    - Tree/book/loader code: MUST use logger
    - User-facing output: Use print() or rich for CLI display
    - Log levels: CRITICAL, ERROR, WARNING, INFO, DEBUG
    - Configuration: config.LOGGING_CONFIG
    - Location: data/logs/recipe_book.log (10MB rotation, 5 backups)
"""

import os
import sys

import logging
import logging.config
from config import LOGGING_CONFIG, LOG_DIR

_configured = False


def setup_logging(force: bool = False):
    """
    Initialize logging configuration once.

    Idempotent - safe to call multiple times. Pass force=True to re-apply
    LOGGING_CONFIG (e.g. after changing the console level).
    """
    global _configured
    if _configured and not force:
        return
    try:
        os.makedirs(str(LOG_DIR), exist_ok=True)
        logging.config.dictConfig(LOGGING_CONFIG)
        _configured = True
    except (OSError, ValueError) as e:
        print(f"Warning: Logging setup failed: {e}", file=sys.stderr)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for module.

    Args:
        name: Module name (use __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Rebalancing recipe book")
    """
    setup_logging()
    return logging.getLogger(name)


def set_console_level(level: str):
    """Change the console handler level at runtime (e.g. from a --verbose flag)."""
    setup_logging()
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level.upper())
