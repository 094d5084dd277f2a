"""Form binding helpers producing checkbox markup for a data source."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from html import escape as html_escape
from typing import Any, Callable, Dict, Iterator, List, Optional

from view_components.errors import InvalidConfiguration


def value_text(value: Any) -> str:
    """Return the text used to show or submit ``value``."""

    if isinstance(value, enum.Enum):
        return value.name
    if value is None:
        return ""
    return str(value)


def member_accessor(name: str) -> Callable[[Any], Any]:
    """Return a function reading member ``name`` from an item.

    Mapping items are looked up by key, other items by public, non-callable
    attribute. Both lookups ignore case. An item without the member raises
    :class:`~view_components.errors.InvalidConfiguration`.
    """

    wanted = name.lower()

    def read(item: Any) -> Any:
        if isinstance(item, Mapping):
            for key, value in item.items():
                if str(key).lower() == wanted:
                    return value
        else:
            for attribute in dir(item):
                if attribute.lower() != wanted or attribute.startswith("_"):
                    continue
                value = getattr(item, attribute)
                if not callable(value):
                    return value
        raise InvalidConfiguration(
            f"Invalid member '{name}': the source item type "
            f"'{type(item).__name__}' does not contain a property '{name}'"
        )

    return read


def field_id(target: str, index: int) -> str:
    """Return the element id of checkbox ``index`` bound to ``target``."""

    return f"{target.replace('.', '_')}_{index}_"


@dataclass
class CheckboxList:
    """Iterates a source and renders the checkbox for the current item."""

    target: str
    source: List[Any]
    selected: List[str] = field(default_factory=list)
    value_member: Optional[str] = None
    _index: int = field(default=-1, init=False, repr=False)

    def __iter__(self) -> Iterator[Any]:
        for index, item in enumerate(self.source):
            self._index = index
            yield item
        self._index = -1

    def __len__(self) -> int:
        return len(self.source)

    def item_value(self, item: Any) -> str:
        if self.value_member:
            return value_text(member_accessor(self.value_member)(item))
        return value_text(item)

    def item(self) -> str:
        """Return the ``<input>`` markup for the item being iterated."""

        if self._index < 0:
            raise RuntimeError("CheckboxList.item() called outside iteration")
        index = self._index
        value = self.item_value(self.source[index])
        checked = ' checked="checked"' if value in self.selected else ""
        return (
            f'<input type="checkbox" id="{field_id(self.target, index)}" '
            f'name="{html_escape(self.target)}[{index}]" '
            f'value="{html_escape(value)}"{checked} />'
        )


@dataclass
class FormHelper:
    """Binds checkbox lists to the currently selected values per target."""

    values: Mapping[str, Iterable[Any]] = field(default_factory=dict)

    def selected_values(self, target: str) -> List[str]:
        current = self.values.get(target)
        if current is None or isinstance(current, (str, bytes)):
            return [value_text(current)] if current else []
        return [value_text(value) for value in current]

    def create_checkbox_list(
        self,
        target: str,
        source: Iterable[Any],
        attributes: Optional[Dict[str, str]] = None,
    ) -> CheckboxList:
        attributes = attributes or {}
        return CheckboxList(
            target=target,
            source=list(source),
            selected=self.selected_values(target),
            value_member=attributes.get("value"),
        )


__all__ = [
    "CheckboxList",
    "FormHelper",
    "field_id",
    "member_accessor",
    "value_text",
]
