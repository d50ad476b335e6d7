from typing import Optional

from core.i18n import t as translate
from core.state import current_language
from phrasebook.models import ReplacementSet


def t(key: str, replacements: Optional[ReplacementSet] = None) -> str:
    """Translate a key based on current language preference."""
    return translate(key, current_language(), replacements)
