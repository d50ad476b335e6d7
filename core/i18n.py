"""Application message catalog and per-language translators."""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional

from phrasebook import Translator, build
from phrasebook.models import ReplacementSet

from core.settings import config_from_env

SUPPORTED_LANGUAGES: Dict[str, str] = {"en": "English", "es": "Español"}
DEFAULT_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "app_title": {
        "en": "Phrasebook",
        "es": "Phrasebook",
    },
    "language_label": {
        "en": "Language",
        "es": "Idioma",
    },
    "username_label": {
        "en": "Your name",
        "es": "Tu nombre",
    },
    "welcome": {
        "en": "Welcome back, {{username}}!",
        "es": "¡Bienvenido, {{username}}!",
    },
    "welcome_anonymous": {
        "en": "Welcome! Tell us your name.",
        "es": "¡Bienvenido! Dinos tu nombre.",
    },
    "version": {
        "en": "Version {{version}}",
        "es": "Versión {{version}}",
    },
}


def normalize_language(language: Optional[str]) -> str:
    if not language:
        return DEFAULT_LANGUAGE
    language = language.strip().lower()
    return language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


@lru_cache()
def get_translator(language: str) -> Translator:
    """Translator for ``language``, built once per language."""
    return build(MESSAGES, language, config_from_env())


def t(key: str, lang: str, replacements: Optional[ReplacementSet] = None) -> str:
    """Translate ``key`` using the specified language."""
    return get_translator(lang).translate(key, replacements)
