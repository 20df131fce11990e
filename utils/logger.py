# -*- coding: utf-8 -*-
"""
Logging configuration for Processing Batch Desk.

One application logger ("procdash") with a rotating file handler and a
console handler; modules take child loggers through get_logger().
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

APP_LOGGER_NAME = "procdash"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_logger: Optional[logging.Logger] = None


def setup_logger(log_path: Optional[Path] = None,
                 console_level: int = logging.INFO) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_path: Log file location (defaults to Config.LOG_PATH)
        console_level: Minimum level echoed to stdout

    Returns:
        The configured "procdash" logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the application logger, configuring it on first use."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
