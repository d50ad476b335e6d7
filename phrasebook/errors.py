"""Translation failures and the default error observer."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)


class TranslationError(Exception):
    """Base class for failures reported by a translator."""


class NoTranslationAvailable(TranslationError):
    """No template exists for ``key`` in ``language``."""

    def __init__(
        self,
        key: Any,
        language: str,
        replacements: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.key = key
        self.language = language
        self.replacements = replacements
        super().__init__(
            f"No translation found for {key}. Language: {language}. "
            f"Replaces: {describe_replacements(replacements)}"
        )


class MalformedTemplate(TranslationError):
    """The stored language variant cannot be used as a template string."""

    def __init__(self, key: Any, language: str, value: Any) -> None:
        self.key = key
        self.language = language
        self.value = value
        super().__init__(
            f"Template for {key} in language {language} is not a string: {value!r}"
        )


def describe_replacements(replacements: Optional[Mapping[str, Any]]) -> str:
    if not replacements:
        return "none"
    if isinstance(replacements, Mapping):
        return str(dict(replacements))
    return str(replacements)


def log_error(error: BaseException, message: str) -> None:
    """Default observer: log the failure and carry on."""
    logger.error(message, exc_info=error)
