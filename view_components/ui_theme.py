"""Streamlit helpers for showing rendered components on the showcase pages."""

from __future__ import annotations

from typing import Optional

import streamlit as st
import streamlit.components.v1 as st_components

# Only the header and the overview card are drawn with Streamlit markdown.
_PAGE_CSS = """
<style>
.vc-header { display: flex; align-items: center; gap: 1rem; margin-bottom: 1.5rem; }
.vc-header__icon { font-size: 2.25rem; }
.vc-header__title { margin: 0; font-size: 1.9rem; }
.vc-header__subtitle { margin: 0.2rem 0 0 0; color: #52606D; }
.vc-card { border: 1px solid #D5E6DC; border-radius: 0.75rem; padding: 1rem 1.5rem; margin-bottom: 1.25rem; }
.vc-card__title { margin: 0 0 0.5rem 0; font-size: 1.15rem; }
</style>
"""

# Component markup is shown in an iframe, which does not inherit the page styles.
COMPONENT_CSS = """
<style>
body { font-family: "Inter", "Segoe UI", system-ui, sans-serif; color: #1F2933; }
.Question { cursor: pointer; font-weight: 600; padding: 0.5rem 0; color: #2F6F4E; }
.Answer { padding: 0 0 0.5rem 1rem; color: #52606D; }
.verticalCheckboxList div, .horizontalCheckboxList span { padding: 0.15rem 0; }
</style>
"""


def apply_app_theme(page_title: str, page_icon: Optional[str] = None) -> None:
    """Configure the page and add the header and card styles."""

    st.set_page_config(page_title=page_title, page_icon=page_icon, layout="wide")
    st.markdown(_PAGE_CSS, unsafe_allow_html=True)


def page_header(title: str, subtitle: Optional[str] = None, icon: Optional[str] = None) -> None:
    """Render the page title with an optional subtitle and icon."""

    icon_markup = f"<span class='vc-header__icon'>{icon}</span>" if icon else ""
    subtitle_markup = f"<p class='vc-header__subtitle'>{subtitle}</p>" if subtitle else ""
    st.markdown(
        f"<div class='vc-header'>{icon_markup}<div>"
        f"<h1 class='vc-header__title'>{title}</h1>{subtitle_markup}</div></div>",
        unsafe_allow_html=True,
    )


def render_card(content: str, title: Optional[str] = None) -> None:
    """Render HTML ``content`` inside a bordered card."""

    heading = f"<h3 class='vc-card__title'>{title}</h3>" if title else ""
    st.markdown(f"<div class='vc-card'>{heading}{content}</div>", unsafe_allow_html=True)


def render_component_html(markup: str, scripts: str = "", *, height: int = 400) -> None:
    """Render component ``markup`` and its ``scripts`` inside an HTML frame."""

    st_components.html(f"{COMPONENT_CSS}{markup}\n{scripts}", height=height, scrolling=True)


__all__ = ["apply_app_theme", "page_header", "render_card", "render_component_html"]
