"""Array and matrix exercises: front insertion, repeat/missing search, spiral and wave orders."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def insert_at_start(values: Iterable[Any], element: Any) -> list[Any]:
    """A new list with ``element`` followed by ``values``."""
    return [element, *values]


def find_repeating_and_missing(values: Iterable[int]) -> tuple[int, int]:
    """``(repeating, missing)`` for numbers drawn from ``1..n`` with one repeat.

    Each number is swapped towards the slot ``number - 1``; the first slot
    left holding the wrong number gives the repeat and the missing number.
    """
    items = list(values)
    size = len(items)
    for value in items:
        if not 1 <= value <= size:
            raise ValueError(f"{value} is outside 1..{size}")
    index = 0
    while index < size:
        target = items[index] - 1
        if items[index] == index + 1 or items[index] == items[target]:
            index += 1
        else:
            items[index], items[target] = items[target], items[index]
    for position, value in enumerate(items, start=1):
        if value != position:
            return value, position
    raise ValueError("no number is repeated")


def _rows(matrix: Sequence[Sequence[Any]]) -> tuple[list[Sequence[Any]], int]:
    rows = list(matrix)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows, width


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Elements read clockwise from the top-left corner, spiralling inwards."""
    rows, width = _rows(matrix)
    total = len(rows) * width
    order: list[Any] = []
    top, bottom, left, right = 0, len(rows) - 1, 0, width - 1
    while len(order) < total:
        order.extend(rows[top][left : right + 1])
        top += 1
        if len(order) == total:
            break
        order.extend(rows[r][right] for r in range(top, bottom + 1))
        right -= 1
        if len(order) == total:
            break
        order.extend(rows[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if len(order) == total:
            break
        order.extend(rows[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return order


def wave_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Elements column by column, going down even columns and up odd ones."""
    rows, width = _rows(matrix)
    order: list[Any] = []
    for column in range(width):
        cells = [row[column] for row in rows]
        order.extend(cells if column % 2 == 0 else reversed(cells))
    return order