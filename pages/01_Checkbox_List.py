"""Streamlit page demonstrating the checkbox list component."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List

import streamlit as st

from Home import load_settings
from view_components.checkbox_list import render_checkbox_list
from view_components.context import RenderContext
from view_components.errors import ViewComponentError
from view_components.form_helper import FormHelper, member_accessor, value_text
from view_components.ui_theme import apply_app_theme, page_header, render_component_html


class TaskStatus(enum.Enum):
    NotStarted = 1
    InProcess = 2
    OnHold = 3
    WaitingForQA = 4
    ReadyForRelease = 5
    Released = 6
    Cancelled = 7


@dataclass(frozen=True)
class Role:
    code: str
    name: str


ROLES = (
    Role("admin", "SiteAdministrator"),
    Role("editor", "ContentEditor"),
    Role("author", "GuestAuthor"),
    Role("viewer", "ReadOnlyViewer"),
)

SOURCES: Dict[str, List[Any]] = {
    "Task status (enum)": list(TaskStatus),
    "Roles (objects)": list(ROLES),
}


def _params_for(source_name: str, source: List[Any]) -> Dict[str, Any]:
    """Collect the component parameters from the sidebar widgets."""

    sidebar = st.sidebar
    params: Dict[str, Any] = {"source": source}
    if source_name.startswith("Roles"):
        params["target"] = "user.roles"
        params["valueMember"] = "code"
        params["displayMember"] = "name"
    else:
        params["target"] = "task.statuses"

    params["horizontal"] = sidebar.toggle("Horizontal", value=False)
    params["splitPascalCase"] = sidebar.toggle("Split Pascal case", value=True)
    columns = int(sidebar.number_input("Columns (0 for a single list)", min_value=0, max_value=6, value=2))
    if columns:
        params["columns"] = columns
        params["columnVerticalAlign"] = sidebar.selectbox("Column alignment", ("top", "middle", "bottom"))
    label_format = sidebar.text_input("Label format", value="")
    if label_format:
        params["labelFormat"] = label_format
    tool_tip = sidebar.text_input("Tool tip", value="")
    if tool_tip:
        params["toolTip"] = tool_tip
    return params


def main() -> None:
    apply_app_theme(page_title="Checkbox list", page_icon="☑️")
    page_header("Checkbox list", "A checkbox per item, optionally spread over columns.", icon="☑️")
    load_settings()

    source_name = st.sidebar.selectbox("Data source", tuple(SOURCES))
    source = SOURCES[source_name]
    params = _params_for(source_name, source)

    value_member = params.get("valueMember")
    read_value = member_accessor(value_member) if value_member else (lambda item: item)
    selected = st.multiselect(
        "Checked values",
        options=[value_text(read_value(item)) for item in source],
    )

    context = RenderContext(params=params)
    try:
        markup = render_checkbox_list(context, FormHelper(values={params["target"]: selected}))
    except ViewComponentError as exc:
        st.error(str(exc))
        return

    render_component_html(markup, height=260)
    with st.expander("Generated markup"):
        st.code(markup, language="html")


if __name__ == "__main__":
    main()
