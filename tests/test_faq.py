"""Tests for the FAQ item and FAQ list components."""

from __future__ import annotations

import importlib

import pytest


def _modules():
    return (
        importlib.import_module("view_components.context"),
        importlib.import_module("view_components.faq"),
        importlib.import_module("view_components.scripts"),
    )


def _item(page_state, scripts, params=None, question="Q?", answer="A."):
    context_module, faq, _ = _modules()
    context = context_module.RenderContext(
        params=params or {},
        sections={"question": question, "answer": answer},
    )
    return faq.render_faq_item(context, page_state, scripts)


def test_build_item_with_prototype_defaults() -> None:
    _, faq, scripts_module = _modules()
    scripts = scripts_module.ScriptHelper()

    markup = faq.build_item("Q?", "A.", 1, faq.FaqSettings(), scripts)

    assert markup == (
        '<div id="Faq_Q1" onclick="Element.toggle(\'Faq_A1\')" class="Question">\n'
        "Q?</div>\n"
        '<div id="Faq_A1" class="Answer">\n'
        "A.<hr/></div>\n"
        "\n"
    )
    assert scripts.includes == ["Ajax"]
    assert scripts.separate_text == ["$('Faq_A1').style.display='none';"]


def test_build_item_with_jquery_and_wrapping() -> None:
    _, faq, scripts_module = _modules()
    scripts = scripts_module.ScriptHelper()
    settings = faq.FaqSettings(question_css_class="q", answer_css_class="a", wrap_items=True, js_library="jquery")

    markup = faq.build_item("Q?", "A.", 2, settings, scripts)

    assert markup.startswith(
        '<li><div id="Faq_Q2" onclick="jQuery(\'#Faq_A2\').slideToggle()" class="q">\n'
    )
    assert '<div id="Faq_A2" class="a">\n' in markup
    assert markup.endswith("<hr/></div>\n</li>\n")
    assert scripts.includes == ["jQuery"]
    assert scripts.separate_text == ["jQuery('#Faq_A2').hide();"]


def test_faq_items_are_numbered_across_the_page() -> None:
    context_module, _, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper()

    first = _item(state, scripts)
    second = _item(state, scripts)

    assert 'id="Faq_Q1"' in first
    assert 'id="Faq_Q2"' in second
    assert state.faq_number == 2


def test_sticky_settings_carry_over_until_cleared() -> None:
    context_module, _, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper()

    first = _item(state, scripts, {"QuestionCssClass": "Sticky", "WrapItems": "True", "Sticky": "true"})
    second = _item(state, scripts)
    third = _item(state, scripts, {"Sticky": "False"})
    fourth = _item(state, scripts)

    assert 'class="Sticky"' in first and first.startswith("<li>")
    assert 'class="Sticky"' in second and second.startswith("<li>")
    assert 'class="Sticky"' in third
    assert 'class="Question"' in fourth and not fourth.startswith("<li>")
    assert state.sticky_faq == {}


def test_parameters_override_sticky_values() -> None:
    context_module, _, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper()

    _item(state, scripts, {"AnswerCssClass": "Saved", "Sticky": "true"})
    markup = _item(state, scripts, {"AnswerCssClass": "Explicit"})

    assert 'class="Explicit"' in markup
    assert state.sticky_faq["answer_css_class"] == "Saved"


def test_unparsable_values_fall_back() -> None:
    context_module, _, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper()

    markup = _item(state, scripts, {"WrapItems": "maybe", "Sticky": "sometimes", "JSLibrary": "dojo"})

    assert not markup.startswith("<li>")
    assert "Element.toggle" in markup
    assert state.sticky_faq == {}


def test_faq_item_requires_both_sections() -> None:
    context_module, faq, scripts_module = _modules()
    errors = importlib.import_module("view_components.errors")
    context = context_module.RenderContext(sections={"question": "Only a question"})

    with pytest.raises(errors.MissingRequiredParameter, match="answer"):
        faq.render_faq_item(context, context_module.PageState(), scripts_module.ScriptHelper())


def test_section_callables_provide_item_text() -> None:
    context_module, faq, scripts_module = _modules()
    context = context_module.RenderContext(
        sections={"question": lambda bag: "Dynamic?", "answer": lambda bag: "Yes."}
    )

    markup = faq.render_faq_item(context, context_module.PageState(), scripts_module.ScriptHelper())

    assert "\nDynamic?</div>" in markup
    assert "\nYes.<hr/></div>" in markup
    assert context.output() == markup


@pytest.mark.parametrize(
    ("list_type", "tag"),
    [("OL", "ol"), ("numbered", "ol"), ("Ordered", "ol"), ("bullet", "ul"), ("UL", "ul"), ("unordered", "ul")],
)
def test_faq_list_wraps_entries(list_type: str, tag: str) -> None:
    context_module, faq, scripts_module = _modules()
    context = context_module.RenderContext(
        params={"elements": [faq.QnA("One?", "1"), faq.QnA("Two?", "2")], "ListType": list_type}
    )

    markup = faq.render_faq_list(context, context_module.PageState(), scripts_module.ScriptHelper())

    assert markup.startswith(f"<{tag}>\n<li>")
    assert markup.endswith(f"</li>\n</{tag}>\n")
    assert markup.count("<li>") == 2


def test_faq_list_without_list_type_has_no_wrapping() -> None:
    context_module, faq, scripts_module = _modules()
    context = context_module.RenderContext(params={"elements": [("One?", "1")]})

    markup = faq.render_faq_list(context, context_module.PageState(), scripts_module.ScriptHelper())

    assert markup.startswith('<div id="Faq_Q1"')
    assert "<li>" not in markup


def test_faq_list_continues_page_numbering() -> None:
    context_module, faq, scripts_module = _modules()
    state = context_module.PageState(faq_number=2)
    scripts = scripts_module.ScriptHelper()
    context = context_module.RenderContext(
        params={
            "elements": [{"question": "One?", "answer": "1"}, {"question": "Two?", "answer": "2"}],
            "JSLibrary": "jquery",
        }
    )

    markup = faq.render_faq_list(context, state, scripts)

    assert 'id="Faq_Q3"' in markup and 'id="Faq_Q4"' in markup
    assert state.faq_number == 4
    assert scripts.separate_text == ["jQuery('#Faq_A3').hide();", "jQuery('#Faq_A4').hide();"]


def test_faq_list_errors() -> None:
    context_module, faq, scripts_module = _modules()
    errors = importlib.import_module("view_components.errors")

    with pytest.raises(errors.MissingRequiredParameter):
        faq.render_faq_list(context_module.RenderContext(), context_module.PageState(), scripts_module.ScriptHelper())

    with pytest.raises(errors.InvalidConfiguration, match="'table' is not an acceptable ListType"):
        faq.render_faq_list(
            context_module.RenderContext(params={"elements": [], "ListType": "table"}),
            context_module.PageState(),
            scripts_module.ScriptHelper(),
        )

    with pytest.raises(errors.InvalidConfiguration):
        faq.render_faq_list(
            context_module.RenderContext(params={"elements": [42]}),
            context_module.PageState(),
            scripts_module.ScriptHelper(),
        )


def test_empty_ordered_list_still_renders_tags() -> None:
    context_module, faq, scripts_module = _modules()
    context = context_module.RenderContext(params={"elements": [], "ListType": "ol"})

    markup = faq.render_faq_list(context, context_module.PageState(), scripts_module.ScriptHelper())

    assert markup == "<ol>\n</ol>\n"


def test_script_helper_renders_each_library_once() -> None:
    context_module, _, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper(sources={"Ajax": "/static/prototype.js", "jQuery": "/static/jquery.js"})

    _item(state, scripts)
    _item(state, scripts)

    assert scripts.render() == (
        '<script type="text/javascript" src="/static/prototype.js"></script>\n'
        '<script type="text/javascript">\n'
        "$('Faq_A1').style.display='none';\n"
        "$('Faq_A2').style.display='none';\n"
        "</script>"
    )


def test_unknown_standard_script_is_rejected() -> None:
    scripts_module = importlib.import_module("view_components.scripts")

    with pytest.raises(KeyError):
        scripts_module.ScriptHelper().include_standard_scripts("Dojo")


def test_empty_css_classes_override_saved_and_default_values() -> None:
    context_module, faq, scripts_module = _modules()
    state = context_module.PageState()
    scripts = scripts_module.ScriptHelper()

    _item(state, scripts, {"QuestionCssClass": "Saved", "Sticky": "true"})
    markup = _item(state, scripts, {"QuestionCssClass": "", "AnswerCssClass": ""})
    listing = faq.render_faq_list(
        context_module.RenderContext(params={"elements": [("Q?", "A.")], "AnswerCssClass": ""}),
        state,
        scripts,
    )

    assert 'onclick="Element.toggle(\'Faq_A2\')" class="">' in markup
    assert '<div id="Faq_A2" class="">' in markup
    assert '<div id="Faq_A3" class="">' in listing
    assert 'class="Question">' in listing
