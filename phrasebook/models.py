from __future__ import annotations

from typing import Any, Callable, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from phrasebook.errors import log_error

# message key -> language code -> template string
MessageDictionary = Mapping[str, Mapping[str, str]]
ReplacementSet = Mapping[str, Optional[Any]]
ErrorObserver = Callable[[BaseException, str], None]
PlaceholderStyle = Literal["single", "double"]


class TranslatorConfig(BaseModel):
    """Settings fixed when a translator is built.

    ``placeholder_style`` selects ``{name}`` (``"single"``) or ``{{name}}``
    (``"double"``) tokens. ``on_error`` receives ``(error, message)`` whenever a
    lookup fails; the default (also used when ``None`` is passed) logs the
    failure.
    """

    model_config = ConfigDict(frozen=True)

    on_error: ErrorObserver = log_error
    placeholder_style: PlaceholderStyle = "double"

    @field_validator("on_error", mode="before")
    @classmethod
    def _default_observer(cls, value: Any) -> Any:
        return log_error if value is None else value
