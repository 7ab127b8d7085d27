# -*- coding: utf-8 -*-
"""
Logging configuration.

Library modules only call ``get_logger``; handlers are installed by the
application entry point through ``setup_logger``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List

PACKAGE_LOGGER_NAME = "stepwizard"

# Silent until an application configures logging
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

# Handlers added by setup_logger, replaced on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logger() -> logging.Logger:
    """
    Setup the stepwizard logger with console and (optional) file handlers.

    Handlers attached by other code are left in place.
    """
    # Import here to avoid circular imports
    from stepwizard.app.config import Config

    # Create logger
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(Config.LOG_LEVEL)

    # Remove handlers from a previous call
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # File handler with rotation
    if Config.LOG_TO_FILE:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(Config.LOG_LEVEL)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        _installed_handlers.append(file_handler)

    # Console handler (INFO and above by default)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(Config.CONSOLE_LOG_LEVEL)
    console_formatter = logging.Formatter(
        "%(levelname)-8s | %(message)s"
    )
    console_handler.setFormatter(console_formatter)
    _installed_handlers.append(console_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, under the stepwizard package logger.

    Does not configure any handlers.
    """
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
