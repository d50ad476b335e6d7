import streamlit as st

from core.i18n import SUPPORTED_LANGUAGES
from core.state import current_language, set_language
from core.version import __version__
from ui.components import t


def _sync_language() -> str:
    """Apply the selector's value before any label is rendered."""
    chosen = st.session_state.get("ui_lang")
    lang = set_language(chosen) if chosen else current_language()
    st.session_state["ui_lang"] = lang
    return lang


def render_topbar() -> str:
    """Render the title row and language selector; return the chosen language."""
    _sync_language()
    left, right = st.columns([3, 1])
    with left:
        st.title(t("app_title"))
        st.caption(t("version", {"version": __version__}))
    with right:
        choice = st.selectbox(
            t("language_label"),
            list(SUPPORTED_LANGUAGES),
            format_func=SUPPORTED_LANGUAGES.get,
            key="ui_lang",
        )
    return set_language(choice)
