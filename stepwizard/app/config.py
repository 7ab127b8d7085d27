# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_LANGUAGE = os.getenv("STEPWIZARD_LANGUAGE", "en")

# Logging
_LOG_LEVEL = os.getenv("STEPWIZARD_LOG_LEVEL", "DEBUG").upper()
_CONSOLE_LOG_LEVEL = os.getenv("STEPWIZARD_CONSOLE_LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("STEPWIZARD_LOG_TO_FILE", "false").lower() in ("true", "1", "yes")
_LOGS_DIR = os.getenv("STEPWIZARD_LOGS_DIR", None)

# Per-user data directory; the installed package may not be writable
_DATA_DIR = Path.home() / ".stepwizard"


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "stepwizard"
    VERSION: str = "1.0.0"

    # Localization
    LANGUAGE: str = _LANGUAGE  # "en" or "ar"

    # Paths
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else _DATA_DIR / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_FILE: str = "stepwizard.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Dialog
    DIALOG_MIN_WIDTH: int = 640
    DIALOG_MIN_HEIGHT: int = 420
    HELP_PANE_PERCENT: int = 30  # Share of a step pane given to help text
