"""Checkbox list component.

Renders a checkbox per item of the ``source`` parameter, bound to the form
field named by ``target``. Items are stacked vertically by default, placed side
by side with ``horizontal=True``, or spread over ``columns`` table cells. Labels
written in Pascal case are split into words unless ``splitPascalCase=False``, so
an item ``InProcess`` is labelled "In Process".

Sections ``containerStart``, ``containerEnd``, ``itemStart`` and ``itemEnd``
replace the default markup for that slot. While an item is being rendered the
property bag holds the item under ``"item"`` and its position under ``"index"``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape as html_escape
from typing import Any, Callable, Dict, List, Optional

from view_components.columns import (
    COLUMN_END,
    TABLE_END,
    TABLE_START,
    assign_columns,
    column_start,
)
from view_components.context import RenderContext
from view_components.errors import InvalidConfiguration, MissingRequiredParameter
from view_components.form_helper import (
    CheckboxList,
    FormHelper,
    field_id,
    member_accessor,
    value_text,
)
from view_components.phrases import split_pascal_case

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "white-space:nowrap;"
DEFAULT_LABEL_STYLE = "padding-left:0.4em; padding-right:1em;"
HORIZONTAL_CSS_CLASS = "horizontalCheckboxList"
VERTICAL_CSS_CLASS = "verticalCheckboxList"


@dataclass
class CheckboxListOptions:
    """Parameters of one checkbox list, with defaults applied."""

    source: List[Any]
    target: str
    value_member: Optional[str] = None
    display: Optional[Callable[[Any], Any]] = None
    horizontal: bool = False
    style: Optional[str] = None
    label_style: Optional[str] = None
    css_class: Optional[str] = None
    split_pascal_case: bool = True
    columns: Optional[int] = None
    column_vertical_align: Optional[str] = None
    tool_tip: Optional[str] = None
    label_format: Optional[str] = None

    @classmethod
    def from_context(cls, context: RenderContext) -> "CheckboxListOptions":
        source = context.iterable_param("source")
        if source is None:
            raise MissingRequiredParameter(
                "The checkbox list component requires a parameter named 'source' that is iterable"
            )
        target = context.str_param("target")
        if target is None:
            raise MissingRequiredParameter(
                "The checkbox list component requires a parameter named 'target' that is a string"
            )

        display = context.param("display")
        if not callable(display):
            display_member = context.str_param("displayMember")
            display = member_accessor(display_member) if display_member else None

        return cls(
            source=source,
            target=target,
            value_member=context.str_param("valueMember"),
            display=display,
            horizontal=context.bool_param("horizontal", False),
            style=context.str_param("style"),
            label_style=context.str_param("labelStyle"),
            css_class=context.str_param("cssClass"),
            split_pascal_case=context.bool_param("splitPascalCase", True),
            columns=context.int_param("columns"),
            column_vertical_align=context.str_param("columnVerticalAlign"),
            tool_tip=context.str_param("toolTip"),
            label_format=context.str_param("labelFormat"),
        )

    @property
    def container_class(self) -> str:
        if self.css_class:
            return self.css_class
        return HORIZONTAL_CSS_CLASS if self.horizontal else VERTICAL_CSS_CLASS

    @property
    def item_tag(self) -> str:
        return "span" if self.horizontal else "div"

    @property
    def uses_columns(self) -> bool:
        return self.columns is not None and self.columns > 0


def label_text(item: Any, options: CheckboxListOptions) -> str:
    """Return the escaped, formatted label for ``item``."""

    value = options.display(item) if options.display else item
    text = value_text(value)
    if options.split_pascal_case:
        text = split_pascal_case(text)
    text = html_escape(text)
    if options.label_format:
        try:
            text = options.label_format.format(text)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise InvalidConfiguration(
                f"Invalid 'labelFormat' {options.label_format!r}: use '{{0}}' for the label text"
            ) from exc
    return text


class _CheckboxListRenderer:
    def __init__(self, context: RenderContext, options: CheckboxListOptions) -> None:
        self.context = context
        self.options = options

    def render(self, form_helper: FormHelper) -> None:
        self._render_start()
        attributes: Dict[str, str] = {}
        if self.options.value_member:
            attributes["value"] = self.options.value_member
        checkboxes = form_helper.create_checkbox_list(
            self.options.target, self.options.source, attributes
        )
        if self.options.uses_columns:
            self._render_columns(checkboxes)
        else:
            for index, item in enumerate(checkboxes):
                self._render_item(checkboxes, item, index)
        self._render_end()

    def _render_start(self) -> None:
        if self.context.has_section("containerStart"):
            self.context.render_section("containerStart")
            return
        title = f" title='{html_escape(self.options.tool_tip)}'" if self.options.tool_tip else ""
        self.context.render_text(
            f"<div class='{self.options.container_class}' "
            f"style='{self.options.style or DEFAULT_STYLE}'{title}>"
        )

    def _render_end(self) -> None:
        if self.context.has_section("containerEnd"):
            self.context.render_section("containerEnd")
        else:
            self.context.render_text("</div>")

    def _render_columns(self, checkboxes: CheckboxList) -> None:
        placed = assign_columns(checkboxes.source, self.options.columns)
        logger.debug(
            "Laying out %d checkboxes for %s in %d columns",
            len(placed),
            self.options.target,
            self.options.columns,
        )
        self.context.render_text(TABLE_START)
        for (slot, _), item in zip(placed, checkboxes):
            if slot.starts_column:
                self.context.render_text(column_start(self.options.column_vertical_align))
            self._render_item(checkboxes, item, slot.index)
            if slot.ends_column:
                self.context.render_text(COLUMN_END)
        self.context.render_text(TABLE_END)

    def _render_item(self, checkboxes: CheckboxList, item: Any, index: int) -> None:
        self.context.property_bag["item"] = item
        self.context.property_bag["index"] = index
        if self.context.has_section("itemStart"):
            self.context.render_section("itemStart")
        else:
            self.context.render_text(f"<{self.options.item_tag}>")

        self.context.render_text(checkboxes.item())
        label_style = self.options.label_style or DEFAULT_LABEL_STYLE
        self.context.render_text(
            f"<label for='{field_id(self.options.target, index)}' style='{label_style}'>"
            f"{label_text(item, self.options)}</label>"
        )

        if self.context.has_section("itemEnd"):
            self.context.render_section("itemEnd")
        else:
            self.context.render_text(f"</{self.options.item_tag}>")


def render_checkbox_list(context: RenderContext, form_helper: Optional[FormHelper] = None) -> str:
    """Render the checkbox list described by ``context`` and return the markup.

    The markup is also appended to ``context``'s output buffer. Raises
    :class:`~view_components.errors.MissingRequiredParameter` when ``source``
    or ``target`` are missing and
    :class:`~view_components.errors.InvalidConfiguration` when
    ``displayMember`` names a member an item does not have.
    """

    options = CheckboxListOptions.from_context(context)
    logger.debug(
        "Rendering checkbox list for %s with %d items", options.target, len(options.source)
    )
    start = len(context.fragments)
    _CheckboxListRenderer(context, options).render(form_helper or FormHelper())
    return "".join(context.fragments[start:])


__all__ = [
    "CheckboxListOptions",
    "DEFAULT_LABEL_STYLE",
    "DEFAULT_STYLE",
    "label_text",
    "render_checkbox_list",
]
