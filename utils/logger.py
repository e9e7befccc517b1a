# -*- coding: utf-8 -*-
"""
Logging for the registration kiosk.

Every module logs through a child of ``Config.LOGGER_NAME``. The rotating
log file keeps the full DEBUG trail (transitions, carousel wraps, store
calls) for support; the console only shows ``Config.LOG_LEVEL`` and up.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_logger: Optional[logging.Logger] = None


def _console_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(console_level: str = None) -> logging.Logger:
    """
    Configure the application logger.

    Safe to call more than once; handlers are replaced, not stacked.

    Args:
        console_level: Level name for stdout, defaults to Config.LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_console_level(console_level or Config.LOG_LEVEL))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module, e.g. ``turtlereg.controllers.wizard_controller``."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
