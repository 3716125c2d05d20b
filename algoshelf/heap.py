"""A binary heap that can order its items smallest-first or largest-first."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Heap:
    """Binary heap of comparable values.

    With ``min_heap`` true the smallest value is on top, otherwise the largest.
    """

    def __init__(self, values: Iterable[Any] = (), min_heap: bool = True) -> None:
        self._items: list[Any] = []
        self.min_heap = min_heap
        for value in values:
            self.push(value)

    def _before(self, a: Any, b: Any) -> bool:
        return a < b if self.min_heap else a > b

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, value: Any) -> None:
        """Add ``value``, moving it up until its parent comes before it."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def top(self) -> Any:
        """The value on top of the heap."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the value on top of the heap."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        value = items.pop()
        self._sift_down(0)
        return value

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._before(items[child], items[best]):
                    best = child
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best