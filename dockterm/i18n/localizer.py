"""Choosing and assembling the translation set for a language."""

from __future__ import annotations

import logging
import os
from dataclasses import fields, replace
from typing import Callable

from dockterm.i18n.chinese import chinese_set
from dockterm.i18n.dutch import dutch_set
from dockterm.i18n.english import TranslationSet, english_set
from dockterm.i18n.french import french_set
from dockterm.i18n.german import german_set
from dockterm.i18n.polish import polish_set
from dockterm.i18n.portuguese import portuguese_set
from dockterm.i18n.spanish import spanish_set
from dockterm.i18n.turkish import turkish_set

_default_log = logging.getLogger(__name__)


class LanguageNotFoundError(LookupError):
    """The configured language has no translation set.

    ``fallback`` holds the English set to use instead.
    """

    def __init__(self, language: str, fallback: TranslationSet) -> None:
        super().__init__(f"Language not found: {language}")
        self.language = language
        self.fallback = fallback


def get_translation_sets() -> dict[str, TranslationSet]:
    """Return every translation set keyed by language code."""
    return {
        "pl": polish_set(),
        "nl": dutch_set(),
        "de": german_set(),
        "tr": turkish_set(),
        "en": english_set(),
        "fr": french_set(),
        "zh": chinese_set(),
        "es": spanish_set(),
        "pt": portuguese_set(),
    }


def _merge(base: TranslationSet, override: TranslationSet) -> TranslationSet:
    changes = {
        f.name: getattr(override, f.name)
        for f in fields(override)
        if getattr(override, f.name) != ""
    }
    return replace(base, **changes)


def new_translation_set(log, language: str) -> TranslationSet:
    """Build the set for ``language``: English with matching entries overridden."""
    (log or _default_log).info("language: " + language)
    result = english_set()
    for code, translation_set in get_translation_sets().items():
        if language.startswith(code):
            result = _merge(result, translation_set)
    return result


def detect_system_language() -> str:
    """Read the user's language from the locale environment variables."""
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(name, "")
        if value:
            return value.split(".", 1)[0].split("_", 1)[0]
    raise LookupError("could not detect language")


def detect_language(lang_detector: Callable[[], str]) -> str:
    """Return what the detector finds, or ``"C"`` if it fails."""
    try:
        return lang_detector()
    except Exception:
        return "C"


def new_translation_set_from_config(log, config_language: str) -> TranslationSet:
    """Build the set for a configured language; ``"auto"`` detects it.

    Raises LanguageNotFoundError, carrying the English fallback, for unknown codes.
    """
    if config_language == "auto":
        return new_translation_set(log, detect_language(detect_system_language))
    if config_language in get_translation_sets():
        return new_translation_set(log, config_language)
    raise LanguageNotFoundError(config_language, new_translation_set(log, "en"))