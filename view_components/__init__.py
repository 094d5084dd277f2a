"""Checkbox list and FAQ view components."""

from .checkbox_list import render_checkbox_list  # noqa: F401
from .columns import column_sizes, layout_columns  # noqa: F401
from .context import PageState, RenderContext  # noqa: F401
from .errors import (  # noqa: F401
    InvalidConfiguration,
    MissingRequiredParameter,
    ViewComponentError,
)
from .faq import QnA, build_item, render_faq_item, render_faq_list  # noqa: F401
from .form_helper import FormHelper  # noqa: F401
from .phrases import split_pascal_case  # noqa: F401
from .scripts import ScriptHelper  # noqa: F401
