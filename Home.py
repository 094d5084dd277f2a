"""Streamlit home screen introducing the view components."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from view_components.columns import column_sizes, layout_columns
from view_components.log import setup_logging
from view_components.phrases import split_pascal_case
from view_components.settings import ComponentSettings, settings_from_mapping
from view_components.ui_theme import apply_app_theme, page_header, render_card

logger = logging.getLogger("view_components.showcase")

SAMPLE_LABELS = ("InProcess", "HasABCDAcronym", "NotStarted", "OnHoldByQA", "Done")


def _secrets_dict(name: str) -> Dict[str, Any]:
    """Return a mapping stored under ``name`` in Streamlit secrets."""

    try:
        value = st.secrets.get(name, {})  # type: ignore[arg-type]
    except FileNotFoundError:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    return {}


# The pages import ``load_settings`` from this module so every page shares the
# same configuration and logging setup.
@st.cache_resource(show_spinner=False)
def load_settings() -> ComponentSettings:
    """Load the showcase configuration from Streamlit secrets."""

    settings = settings_from_mapping(_secrets_dict("view_components"), _secrets_dict("github"))
    setup_logging(settings.log_level)
    logger.info("Loaded view component settings (remote FAQ: %s)", settings.github is not None)
    return settings


def column_layout_frame(item_count: int, column_count: int) -> pd.DataFrame:
    """Return the column assignment of ``item_count`` items as a data frame."""

    rows: List[Dict[str, Any]] = [
        {
            "Item": slot.index,
            "Column": slot.column + 1,
            "Opens column": slot.starts_column,
            "Closes column": slot.ends_column,
        }
        for slot in layout_columns(item_count, column_count)
    ]
    return pd.DataFrame(rows, columns=["Item", "Column", "Opens column", "Closes column"])


def main() -> None:
    """Render the home screen."""

    apply_app_theme(page_title="View components", page_icon="🧩")
    page_header(
        "View components",
        "Checkbox lists and FAQ blocks rendered as plain HTML.",
        icon="🧩",
    )
    load_settings()

    render_card(
        "<p>Use the navigation menu to try the checkbox list and FAQ components. "
        "This page shows the two helpers they are built on.</p>",
        title="Overview",
    )

    st.subheader("Pascal case labels")
    label = st.text_input("Label", value=SAMPLE_LABELS[0])
    st.code(split_pascal_case(label) or " ", language=None)
    st.dataframe(
        pd.DataFrame(
            {"Label": list(SAMPLE_LABELS), "Phrase": [split_pascal_case(item) for item in SAMPLE_LABELS]}
        ),
        hide_index=True,
        use_container_width=True,
    )

    st.subheader("Column layout")
    count_col, columns_col = st.columns(2)
    item_count = int(count_col.number_input("Items", min_value=0, max_value=200, value=10))
    column_count = int(columns_col.number_input("Columns", min_value=1, max_value=20, value=3))
    sizes = column_sizes(item_count, column_count)
    st.caption("Column sizes: " + (", ".join(str(size) for size in sizes) or "no columns"))
    st.dataframe(column_layout_frame(item_count, column_count), hide_index=True, use_container_width=True)


if __name__ == "__main__":
    main()
