"""Message lookup with placeholder substitution.

This package also exposes the package version for runtime display."""

from phrasebook.errors import (
    MalformedTemplate,
    NoTranslationAvailable,
    TranslationError,
    log_error,
)
from phrasebook.models import TranslatorConfig
from phrasebook.placeholders import placeholder_names, substitute, token
from phrasebook.translator import Resolution, Translator, build

__all__ = [
    "MalformedTemplate",
    "NoTranslationAvailable",
    "Resolution",
    "TranslationError",
    "Translator",
    "TranslatorConfig",
    "__version__",
    "build",
    "log_error",
    "placeholder_names",
    "substitute",
    "token",
]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
