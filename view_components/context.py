"""Render context and page state passed explicitly into each component."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

Section = Union[str, Callable[[Dict[str, Any]], str]]


def _lower_keys(value: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``value`` keyed by lower-cased names."""

    return {str(key).lower(): item for key, item in value.items()}


@dataclass
class PageState:
    """State shared by the components rendered on one page.

    ``faq_number`` keeps question/answer ids unique across several FAQ
    components and ``sticky_faq`` holds settings saved with ``Sticky=true``.
    Callers create one instance per page render and pass it to every component.
    """

    faq_number: int = 0
    sticky_faq: Dict[str, Any] = field(default_factory=dict)

    def next_faq_number(self) -> int:
        self.faq_number += 1
        return self.faq_number


@dataclass
class RenderContext:
    """Parameters, sections and output buffer for one component invocation."""

    params: Mapping[str, Any] = field(default_factory=dict)
    sections: Mapping[str, Section] = field(default_factory=dict)
    property_bag: Dict[str, Any] = field(default_factory=dict)
    fragments: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._params = _lower_keys(self.params)
        self._sections = _lower_keys(self.sections)

    def param(self, name: str, default: Any = None) -> Any:
        """Return parameter ``name`` (case-insensitive) or ``default``."""

        value = self._params.get(name.lower())
        return default if value is None else value

    def str_param(self, name: str) -> Optional[str]:
        """Return parameter ``name`` when it is a string, otherwise ``None``."""

        value = self.param(name)
        return value if isinstance(value, str) else None

    def bool_param(self, name: str, default: bool) -> bool:
        """Return parameter ``name`` when it is a real bool, else ``default``."""

        value = self.param(name)
        return value if isinstance(value, bool) else default

    def int_param(self, name: str) -> Optional[int]:
        """Return parameter ``name`` when it is an int (bools excluded)."""

        value = self.param(name)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    def iterable_param(self, name: str) -> Optional[List[Any]]:
        """Return parameter ``name`` materialised as a list, if iterable."""

        value = self.param(name)
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            return None
        return list(value)

    def has_section(self, name: str) -> bool:
        return name.lower() in self._sections

    def section_text(self, name: str) -> str:
        """Return the text of section ``name`` evaluated against the property bag."""

        section = self._sections[name.lower()]
        if callable(section):
            return str(section(self.property_bag))
        return str(section)

    def render_section(self, name: str) -> None:
        self.render_text(self.section_text(name))

    def render_text(self, text: str) -> None:
        self.fragments.append(text)

    def output(self) -> str:
        """Return everything rendered so far."""

        return "".join(self.fragments)


__all__ = ["PageState", "RenderContext", "Section"]
