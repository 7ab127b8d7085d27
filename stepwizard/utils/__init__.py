# -*- coding: utf-8 -*-
"""
stepwizard utility module
"""

from .logger import get_logger, setup_logger
from .i18n import I18n

__all__ = [
    "get_logger",
    "setup_logger",
    "I18n",
]
