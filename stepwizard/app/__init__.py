# -*- coding: utf-8 -*-
"""
stepwizard application settings.
"""

from .config import Config

__all__ = ["Config"]
