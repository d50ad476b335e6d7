"""Message lookup and rendering.

A :class:`Translator` closes over a message dictionary, a language and a
:class:`~phrasebook.models.TranslatorConfig`. Rendering never raises: failed
lookups are reported to ``config.on_error`` and render as an empty string.

>>> messages = {"hello": {"en": "Hello, {{name}}!", "pt": "Olá, {{name}}!"}}
>>> t = build(messages, "en")
>>> t("hello", {"name": "Alice"})
'Hello, Alice!'
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Optional

from phrasebook.errors import (
    MalformedTemplate,
    NoTranslationAvailable,
    describe_replacements,
)
from phrasebook.models import MessageDictionary, ReplacementSet, TranslatorConfig
from phrasebook.placeholders import placeholder_names, substitute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of a lookup: rendered ``text`` or the ``error`` that stopped it."""

    text: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Translator:
    messages: MessageDictionary
    language: str
    config: TranslatorConfig = field(default_factory=TranslatorConfig)

    def _template(self, key: Any, replacements: Optional[ReplacementSet]) -> Resolution:
        try:
            entry = self.messages[key]
        except (LookupError, TypeError):
            entry = None
        if not isinstance(entry, Mapping) or self.language not in entry:
            return Resolution(error=NoTranslationAvailable(key, self.language, replacements))

        value = entry[self.language]
        if isinstance(value, str):
            return Resolution(text=value)
        if value is None:
            return Resolution(error=MalformedTemplate(key, self.language, value))
        try:
            return Resolution(text=str(value))
        except Exception:
            return Resolution(error=MalformedTemplate(key, self.language, value))

    def resolve(self, key: Any, replacements: Optional[ReplacementSet] = None) -> Resolution:
        """Look up ``key`` and fill its placeholders without reporting failures.

        Nothing is raised: lookup failures and errors met while substituting
        come back as ``Resolution.error``.
        """
        try:
            found = self._template(key, replacements)
            if not found.ok:
                return found
            return Resolution(
                text=substitute(found.text, replacements, self.config.placeholder_style)
            )
        except Exception as exc:
            return Resolution(error=exc)

    def translate(self, key: Any, replacements: Optional[ReplacementSet] = None) -> str:
        """Render ``key`` in this translator's language.

        Placeholders missing from ``replacements`` (or mapped to ``None``) are
        left untouched. On any failure the error observer is called once and
        an empty string is returned.
        """
        result = self.resolve(key, replacements)
        if not result.ok:
            self._report(result.error, key, replacements)
            return ""
        return result.text

    __call__ = translate

    def placeholders(self, key: Any) -> FrozenSet[str]:
        """Placeholder names used by ``key`` in this language."""
        found = self._template(key, None)
        if not found.ok:
            return frozenset()
        return placeholder_names(found.text, self.config.placeholder_style)

    def with_language(self, language: str) -> "Translator":
        """Return a translator for ``language`` over the same messages and config."""
        return replace(self, language=language)

    def _report(self, error: BaseException, key: Any, replacements: Optional[ReplacementSet]) -> None:
        try:
            message = (
                f"Error translating message {key}. "
                f"Replaces: {describe_replacements(replacements)}"
            )
            self.config.on_error(error, message)
        except Exception:
            logger.exception("Error observer failed while reporting message %s", key)


def build(
    messages: MessageDictionary,
    language: str,
    config: Optional[TranslatorConfig] = None,
) -> Translator:
    """Create a :class:`Translator`; nothing is validated until lookup time."""
    return Translator(messages, language, config if config is not None else TranslatorConfig())
