"""Placeholder tokens: building, scanning and substituting them.

Two bracket styles are supported. ``"double"`` tokens look like ``{{name}}``
and ``"single"`` tokens like ``{name}``. A single-curly token is only
recognised when it is not directly wrapped by another brace, so ``{name}``
never matches inside ``{{name}}``.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, FrozenSet, Mapping, Optional

from phrasebook.models import PlaceholderStyle

_SCANNERS = {
    "double": re.compile(r"\{\{(.*?)\}\}", re.DOTALL),
    "single": re.compile(r"(?<!\{)\{([^{}]*)\}(?!\})"),
}


def token(name: str, style: PlaceholderStyle = "double") -> str:
    """Return the literal token for ``name`` in ``style``."""
    if style == "single":
        return "{" + name + "}"
    return "{{" + name + "}}"


@lru_cache(maxsize=256)
def _token_pattern(name: str, style: str) -> re.Pattern[str]:
    literal = re.escape(token(name, style))
    if style == "single":
        return re.compile(r"(?<!\{)" + literal + r"(?!\})")
    return re.compile(literal)


def placeholder_names(template: str, style: PlaceholderStyle = "double") -> FrozenSet[str]:
    """Names of every placeholder in ``template``, duplicates collapsed.

    Tokens are scanned left to right without overlapping, so
    ``"{{a}} {{b}} {{a}}"`` yields ``{"a", "b"}``.
    """
    return frozenset(_SCANNERS[style].findall(template))


def substitute(
    template: str,
    replacements: Optional[Mapping[str, Any]],
    style: PlaceholderStyle = "double",
) -> str:
    """Fill ``template`` from ``replacements``.

    Entries whose value is ``None`` are skipped and placeholders without a
    replacement stay in the output as written. Only the first occurrence of
    each token is replaced: ``"{{n}} and {{n}}"`` with ``{"n": "1"}`` renders
    as ``"1 and {{n}}"``.
    """
    if not replacements:
        return template
    for name, value in replacements.items():
        if value is None:
            continue
        text = str(value)
        template = _token_pattern(str(name), style).sub(lambda _m: text, template, count=1)
    return template
