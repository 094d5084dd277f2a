"""Lay out an ordered list of items into near-equal columns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

TABLE_START = "<table><tr>"
TABLE_END = "</tr></table>"
COLUMN_END = "</td>"


@dataclass(frozen=True)
class ColumnSlot:
    """Placement of one item within the column layout."""

    index: int
    column: int
    starts_column: bool
    ends_column: bool


def items_per_column(item_count: int, column_count: int) -> int:
    """Return how many items fill a column before the next one opens."""

    if column_count <= 0:
        raise ValueError(f"column_count must be positive, got {column_count}")
    return math.ceil(item_count / column_count)


def layout_columns(item_count: int, column_count: int) -> List[ColumnSlot]:
    """Return one :class:`ColumnSlot` per item, filling columns left to right.

    Columns are filled top to bottom before moving on, so ten items over three
    columns land as 4, 4 and 2. The final column is closed as soon as the last
    item is placed, which means fewer than ``column_count`` columns can be
    produced when there are few items.
    """

    per_column = items_per_column(item_count, column_count)
    slots: List[ColumnSlot] = []
    position = 1
    column = 0
    for index in range(item_count):
        starts = position == 1
        placed = index + 1
        ends = position == per_column or placed == item_count
        slots.append(ColumnSlot(index=index, column=column, starts_column=starts, ends_column=ends))
        if ends:
            position = 1
            column += 1
        else:
            position += 1
    return slots


def column_sizes(item_count: int, column_count: int) -> List[int]:
    """Return the number of items in each column that gets emitted."""

    sizes: List[int] = []
    for slot in layout_columns(item_count, column_count):
        if slot.starts_column:
            sizes.append(0)
        sizes[-1] += 1
    return sizes


def assign_columns(items: Iterable[Any], column_count: int) -> List[Tuple[ColumnSlot, Any]]:
    """Pair each of ``items`` with its slot, preserving the original order."""

    materialised = list(items)
    return list(zip(layout_columns(len(materialised), column_count), materialised))


def column_start(vertical_align: str | None = None) -> str:
    """Return the opening cell markup for a column."""

    return f"<td style='vertical-align:{vertical_align or 'top'};'>"


__all__ = [
    "COLUMN_END",
    "ColumnSlot",
    "TABLE_END",
    "TABLE_START",
    "assign_columns",
    "column_sizes",
    "column_start",
    "items_per_column",
    "layout_columns",
]
