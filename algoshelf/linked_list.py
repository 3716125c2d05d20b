"""Singly linked lists: insertion at either end or a position, and cycle detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list that keeps both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = Node(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the current tail."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` at a 1-based ``position``.

        A position of zero or less inserts at the head, one past the length
        or more at the tail. Positions 1 and 2 both insert right after the
        head.
        """
        if position <= 0 or self.head is None:
            self.insert_at_head(value)
            return
        if position > len(self):
            self.insert_at_tail(value)
            return
        before = self.head
        for _ in range(max(position - 2, 0)):
            assert before.next is not None
            before = before.next
        node = Node(value, before.next)
        before.next = node
        if before is self.tail:
            self.tail = node


def has_cycle(head: Node | None) -> bool:
    """Whether following ``next`` from ``head`` loops (tortoise and hare)."""
    tortoise = hare = head
    while True:
        if hare is None or hare.next is None or tortoise is None:
            return False
        tortoise = tortoise.next
        hare = hare.next.next
        if hare is tortoise:
            return True