import streamlit as st

from core.settings import configure_logging
from ui.components import t
from ui.topbar import render_topbar


def render_greeting() -> None:
    """Ask for a name and greet the user in the selected language."""
    name = st.text_input(t("username_label"), key="username")
    if name:
        st.subheader(t("welcome", {"username": name}))
    else:
        st.subheader(t("welcome_anonymous"))


def main() -> None:
    st.set_page_config(page_title="Phrasebook")
    render_topbar()
    render_greeting()


if __name__ == "__main__":
    configure_logging()
    main()
