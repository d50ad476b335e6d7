from typing import Any, Dict

import streamlit as st

from core.i18n import normalize_language
from core.settings import language_from_env

# Preferences live under one session key so widget keys stay out of them.
PREFS_KEY = "ui_prefs"


def _prefs() -> Dict[str, Any]:
    return st.session_state.setdefault(PREFS_KEY, {})


def current_language() -> str:
    """Language chosen for this session, falling back to the environment."""
    lang = st.session_state.get(PREFS_KEY, {}).get("language")
    if lang is None:
        return language_from_env()
    return normalize_language(lang)


def set_language(language: str) -> str:
    lang = normalize_language(language)
    _prefs()["language"] = lang
    return lang
