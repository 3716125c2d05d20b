"""A last-in-first-out stack and a first-in-first-out queue built from two stacks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Stack:
    """Last-in-first-out stack."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; an empty stack is left alone and gives None."""
        if not self._items:
            return None
        return self._items.pop()

    def top(self) -> Any:
        """The value on top."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]


class TwoStackQueue:
    """First-in-first-out queue kept in two stacks."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._inbox: list[Any] = list(values)
        self._outbox: list[Any] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __bool__(self) -> bool:
        return bool(self._inbox or self._outbox)

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._inbox.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        self._shift()
        return self._outbox.pop()

    def front(self) -> Any:
        """The front value."""
        self._shift()
        return self._outbox[-1]