"""Streamlit page demonstrating the FAQ item and FAQ list components."""

from __future__ import annotations

from typing import List

import pandas as pd
import requests
import streamlit as st

from Home import load_settings
from view_components.context import PageState, RenderContext
from view_components.errors import ViewComponentError
from view_components.faq import QnA, faq_table, render_faq_item, render_faq_list
from view_components.faq_source import load_faq_entries, load_remote_faq_entries
from view_components.scripts import ScriptHelper
from view_components.ui_theme import apply_app_theme, page_header, render_component_html

LIST_TYPES = ("none", "ordered", "unordered")
JS_LIBRARIES = ("proto", "jquery")


@st.cache_data(show_spinner=False, ttl=300)
def _load_entries(use_remote: bool) -> List[QnA]:
    """Load FAQ entries from GitHub when configured, otherwise from disk."""

    settings = load_settings()
    if use_remote and settings.github is not None:
        return load_remote_faq_entries(settings.github)
    return load_faq_entries(settings.faq_path)


def main() -> None:
    apply_app_theme(page_title="FAQ", page_icon="❓")
    page_header("Frequently asked questions", "Click a question to show its answer.", icon="❓")
    settings = load_settings()

    sidebar = st.sidebar
    use_remote = sidebar.toggle(
        "Load from GitHub",
        value=settings.github is not None,
        disabled=settings.github is None,
    )
    list_type = sidebar.selectbox("List type", LIST_TYPES)
    js_library = sidebar.selectbox("JavaScript library", JS_LIBRARIES)

    try:
        entries = _load_entries(use_remote)
    except (OSError, ValueError, requests.RequestException) as exc:
        st.error(f"Unable to load FAQ entries: {exc}")
        return

    page_state = PageState()
    scripts = ScriptHelper(sources=dict(settings.script_sources))
    try:
        intro = render_faq_item(
            RenderContext(
                params={"JSLibrary": js_library, "WrapItems": "false"},
                sections={
                    "question": "What is on this page?",
                    "answer": "One FAQ item written inline, followed by a FAQ list loaded from a data source.",
                },
            ),
            page_state,
            scripts,
        )
        listing = render_faq_list(
            RenderContext(params={"elements": entries, "ListType": list_type, "JSLibrary": js_library}),
            page_state,
            scripts,
        )
    except ViewComponentError as exc:
        st.error(str(exc))
        return

    markup = intro + listing
    render_component_html(markup, scripts.render(), height=520)

    with st.expander("FAQ entries"):
        st.dataframe(pd.DataFrame(faq_table(entries)), hide_index=True, use_container_width=True)
    with st.expander("Generated markup"):
        st.code(markup + "\n" + scripts.render(), language="html")


if __name__ == "__main__":
    main()
