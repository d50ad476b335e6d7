"""Environment-driven application settings."""
from __future__ import annotations

import logging
import os

from phrasebook import TranslatorConfig


def language_from_env() -> str:
    """Preferred UI language, ``PHRASEBOOK_LANGUAGE`` or ``"en"``."""
    from core.i18n import normalize_language

    return normalize_language(os.getenv("PHRASEBOOK_LANGUAGE"))


def config_from_env() -> TranslatorConfig:
    """Build a translator config from ``PHRASEBOOK_PLACEHOLDER_STYLE``.

    An unknown style raises ``pydantic.ValidationError``.
    """
    style = os.getenv("PHRASEBOOK_PLACEHOLDER_STYLE", "double").strip().lower()
    return TranslatorConfig(placeholder_style=style)


def configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
