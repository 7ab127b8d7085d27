# -*- coding: utf-8 -*-
"""
Internationalization (i18n) support for the wizard's navigation labels.
"""

from typing import Dict, Optional


class I18n:
    """Internationalization manager for English/Arabic translations."""

    SUPPORTED_LANGUAGES = ("en", "ar")

    def __init__(self, default_language: str = "en"):
        self._language = default_language if default_language in self.SUPPORTED_LANGUAGES else "en"
        self._translations = self._load_translations()

    def _load_translations(self) -> Dict[str, Dict[str, str]]:
        """Load translation dictionaries."""
        return {
            # Navigation buttons
            "wizard.back": {"en": "Back", "ar": "السابق"},
            "wizard.next": {"en": "Next", "ar": "التالي"},
            "wizard.finish": {"en": "Finish", "ar": "إنهاء"},
        }

    def set_language(self, language: str):
        """Set current language (en or ar)."""
        if language in self.SUPPORTED_LANGUAGES:
            self._language = language

    def get_language(self) -> str:
        """Get current language."""
        return self._language

    def is_arabic(self) -> bool:
        """Check if current language is Arabic."""
        return self._language == "ar"

    def t(self, key: str, **kwargs) -> str:
        """
        Translate a key to the current language.

        Args:
            key: Translation key
            **kwargs: Format arguments

        Returns:
            Translated string, or the key itself when unknown
        """
        return self.translate(key, **kwargs)

    def translate(self, key: str, language: Optional[str] = None, **kwargs) -> str:
        """
        Translate a key to a specific language.

        Args:
            key: Translation key
            language: Target language (defaults to current)
            **kwargs: Format arguments

        Returns:
            Translated string
        """
        lang = language or self._language
        translation = self._translations.get(key, {})
        text = translation.get(lang, key)

        if kwargs:
            try:
                text = text.format(**kwargs)
            except KeyError:
                pass

        return text

    def add_translation(self, key: str, en: str, ar: str):
        """Add a new translation."""
        self._translations[key] = {"en": en, "ar": ar}
