# -*- coding: utf-8 -*-
"""Message catalogue lookup for user-facing text."""

from typing import Dict
from PyQt5.QtCore import Qt

from services.translations.en import EN_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton message catalogue with a per-process current language."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = "en"
            cls._instance._translations: Dict[str, Dict[str, str]] = {
                "en": EN_TRANSLATIONS,
            }
        return cls._instance

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"No catalogue for language '{lang_code}', keeping '{self._current_language}'")
            return
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format '{key}' with {kwargs}")
        return translation

    def get_layout_direction(self):
        return Qt.LeftToRight


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def get_layout_direction():
    return _translator.get_layout_direction()
