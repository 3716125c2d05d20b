"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

RUN = 16


def _sift_down(items: list[Any], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    for i in range(1, len(items)):
        index = i
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] > items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent
    for size in range(len(items) - 1, 0, -1):
        items[0], items[size] = items[size], items[0]
        _sift_down(items, 0, size)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping each item leftwards until it is in place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    left, right = low, high - 1
    while left <= right:
        if items[left] >= pivot >= items[right]:
            items[left], items[right] = items[right], items[left]
        if items[left] <= pivot:
            left += 1
        if pivot <= items[right]:
            right -= 1
    items[high], items[left] = items[left], items[high]
    return left


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the right-most element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(items, low, high)
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining item into place."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort with the gap halved each pass."""
    items = list(values)
    gap = len(items) // 2
    while gap >= 1:
        for i in range(gap, len(items)):
            current = items[i]
            j = i - gap
            while j >= 0 and items[j] > current:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = current
        gap //= 2
    return items


def tim_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion-sort runs of 16 items, then merge runs of doubling size."""
    items = list(values)
    runs = [insertion_sort(items[i:i + RUN]) for i in range(0, len(items), RUN)]
    while len(runs) > 1:
        paired = [
            _stable_merge(runs[i], runs[i + 1]) if i + 1 < len(runs) else runs[i]
            for i in range(0, len(runs), 2)
        ]
        runs = paired
    return runs[0] if runs else []


def _stable_merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None


def tree_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting into a binary search tree and reading it in order.

    Equal values are stored once, so duplicates are dropped.
    """
    root: _Node | None = None
    for value in values:
        if root is None:
            root = _Node(value)
            continue
        node = root
        while True:
            if value < node.key:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.key:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                break

    result: list[Any] = []
    stack: list[_Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.key)
        node = node.right
    return result