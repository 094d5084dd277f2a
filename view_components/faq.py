"""Frequently asked question components.

Each question is rendered as a clickable block; clicking it shows or hides the
answer below it. The answer is visible in the markup and hidden by a script
statement afterwards, so pages without JavaScript still show every answer.

``render_faq_item`` renders one question whose text comes from the ``question``
and ``answer`` sections. ``render_faq_list`` renders every entry of the
``elements`` parameter, optionally inside an ``<ol>`` or ``<ul>``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, replace
from typing import Any, Iterable, List, Optional, Tuple

from view_components.context import PageState, RenderContext
from view_components.errors import InvalidConfiguration, MissingRequiredParameter
from view_components.scripts import JQUERY_SCRIPT, PROTOTYPE_SCRIPT, ScriptHelper

logger = logging.getLogger(__name__)

PROTOTYPE = "proto"
JQUERY = "jquery"
JS_LIBRARIES = (PROTOTYPE, JQUERY)

LIST_TAGS = {
    "none": "",
    "ordered": "ol",
    "numbered": "ol",
    "ol": "ol",
    "unordered": "ul",
    "ul": "ul",
    "bullet": "ul",
}

_QUESTION_FORMATS = {
    PROTOTYPE: "<div id=\"Faq_Q{0}\" onclick=\"Element.toggle('Faq_A{0}')\" class=\"{1}\">",
    JQUERY: "<div id=\"Faq_Q{0}\" onclick=\"jQuery('#Faq_A{0}').slideToggle()\" class=\"{1}\">",
}
_HIDE_FORMATS = {
    PROTOTYPE: "$('Faq_A{0}').style.display='none';",
    JQUERY: "jQuery('#Faq_A{0}').hide();",
}
_STANDARD_SCRIPTS = {PROTOTYPE: PROTOTYPE_SCRIPT, JQUERY: JQUERY_SCRIPT}


@dataclass(frozen=True)
class QnA:
    """A question and its answer."""

    question: str
    answer: str


@dataclass(frozen=True)
class FaqSettings:
    """Presentation settings shared by the FAQ components."""

    question_css_class: str = "Question"
    answer_css_class: str = "Answer"
    wrap_items: bool = False
    js_library: str = PROTOTYPE


def parse_bool(value: Any) -> Optional[bool]:
    """Return ``value`` as a bool when it is a bool or ``"true"``/``"false"``."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "false"):
            return text == "true"
    return None


def normalise_js_library(value: Any) -> str:
    """Return a supported library name, falling back to prototype."""

    text = str(value or "").strip().lower()
    return text if text in JS_LIBRARIES else PROTOTYPE


def coerce_qna(entry: Any) -> QnA:
    """Return ``entry`` as a :class:`QnA`.

    Accepts ``QnA`` instances, mappings with ``question`` and ``answer`` keys,
    and two-item sequences.
    """

    if isinstance(entry, QnA):
        return entry
    if isinstance(entry, Mapping) and "question" in entry and "answer" in entry:
        return QnA(str(entry["question"]), str(entry["answer"]))
    if isinstance(entry, Sequence) and not isinstance(entry, (str, bytes)) and len(entry) == 2:
        return QnA(str(entry[0]), str(entry[1]))
    raise InvalidConfiguration(f"Cannot use {entry!r} as a question and answer pair")


def build_item(
    question: str,
    answer: str,
    number: int,
    settings: FaqSettings,
    scripts: ScriptHelper,
) -> str:
    """Return the markup of FAQ entry ``number`` and queue its hide script."""

    library = normalise_js_library(settings.js_library)
    scripts.include_standard_scripts(_STANDARD_SCRIPTS[library])

    parts: List[str] = []
    if settings.wrap_items:
        parts.append("<li>")
    parts.append(_QUESTION_FORMATS[library].format(number, settings.question_css_class))
    parts.append("\n")
    parts.append(question)
    parts.append("</div>\n")
    parts.append(f'<div id="Faq_A{number}" class="{settings.answer_css_class}">\n')
    parts.append(answer)
    parts.append("<hr/></div>\n")
    if settings.wrap_items:
        parts.append("</li>")
    parts.append("\n")

    scripts.insert_separate_text(_HIDE_FORMATS[library].format(number))
    return "".join(parts)


def _given(value: Optional[str], fallback: str) -> str:
    return fallback if value is None else value


def resolve_item_settings(context: RenderContext, page_state: PageState) -> FaqSettings:
    """Resolve FAQ item settings from saved sticky values and parameters.

    Saved values replace the defaults and explicit parameters replace both.
    ``Sticky=true`` saves the result for later items on the page and
    ``Sticky=false`` forgets anything saved before.
    """

    saved = page_state.sticky_faq
    settings = FaqSettings(**saved) if saved else FaqSettings()

    wrap_items = parse_bool(context.param("WrapItems"))
    if wrap_items is None and context.param("WrapItems") is not None:
        wrap_items = False
    settings = replace(
        settings,
        question_css_class=_given(context.str_param("QuestionCssClass"), settings.question_css_class),
        answer_css_class=_given(context.str_param("AnswerCssClass"), settings.answer_css_class),
        js_library=normalise_js_library(_given(context.str_param("JSLibrary"), settings.js_library)),
        wrap_items=settings.wrap_items if wrap_items is None else wrap_items,
    )

    sticky = parse_bool(context.param("Sticky"))
    if sticky is True:
        page_state.sticky_faq = asdict(settings)
        logger.debug("Saved sticky FAQ settings %s", page_state.sticky_faq)
    elif sticky is False:
        page_state.sticky_faq = {}
        logger.debug("Cleared sticky FAQ settings")
    return settings


def render_faq_item(
    context: RenderContext,
    page_state: PageState,
    scripts: ScriptHelper,
) -> str:
    """Render one FAQ entry from the ``question`` and ``answer`` sections."""

    number = page_state.next_faq_number()
    settings = resolve_item_settings(context, page_state)
    for name in ("question", "answer"):
        if not context.has_section(name):
            raise MissingRequiredParameter(f"The FAQ item component requires a section named '{name}'")

    markup = build_item(
        context.section_text("question"),
        context.section_text("answer"),
        number,
        settings,
        scripts,
    )
    context.render_text(markup)
    return markup


def resolve_list_type(value: Any) -> Tuple[str, bool]:
    """Return ``(list_tag, wrap_items)`` for a ``ListType`` value."""

    text = str(value if value is not None else "none")
    tag = LIST_TAGS.get(text.lower())
    if tag is None:
        raise InvalidConfiguration(f"'{text}' is not an acceptable ListType")
    return tag, bool(tag)


def render_faq_list(
    context: RenderContext,
    page_state: PageState,
    scripts: ScriptHelper,
) -> str:
    """Render every entry of the ``elements`` parameter.

    Numbering continues from ``page_state`` so ids stay unique when FAQ items
    and lists share a page.
    """

    elements = context.iterable_param("elements")
    if elements is None:
        raise MissingRequiredParameter("The FAQ list component requires an 'elements' parameter")
    entries = [coerce_qna(entry) for entry in elements]

    list_tag, wrap_items = resolve_list_type(context.str_param("ListType"))
    settings = FaqSettings(
        question_css_class=_given(context.str_param("QuestionCssClass"), "Question"),
        answer_css_class=_given(context.str_param("AnswerCssClass"), "Answer"),
        wrap_items=wrap_items,
        js_library=normalise_js_library(context.str_param("JSLibrary")),
    )
    logger.debug("Rendering %d FAQ entries as list type %r", len(entries), list_tag or "none")

    parts: List[str] = []
    if list_tag:
        parts.append(f"<{list_tag}>\n")
    for entry in entries:
        number = page_state.next_faq_number()
        parts.append(build_item(entry.question, entry.answer, number, settings, scripts))
    if list_tag:
        parts.append(f"</{list_tag}>\n")

    markup = "".join(parts)
    context.render_text(markup)
    return markup


def faq_table(entries: Iterable[QnA]) -> List[dict]:
    """Return ``entries`` as rows suitable for a data frame."""

    return [asdict(entry) for entry in entries]


__all__ = [
    "FaqSettings",
    "LIST_TAGS",
    "QnA",
    "build_item",
    "coerce_qna",
    "faq_table",
    "parse_bool",
    "render_faq_item",
    "render_faq_list",
    "resolve_item_settings",
    "resolve_list_type",
]
