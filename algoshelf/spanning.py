"""Minimum spanning trees with Kruskal's algorithm and a disjoint-set forest."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    start: int
    end: int
    weight: float


class UnionFind:
    """Disjoint sets over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._components = size

    def __len__(self) -> int:
        """Number of disjoint sets."""
        return self._components

    def find(self, key: int) -> int:
        """Representative of the set holding ``key``."""
        if not 0 <= key < len(self._parent):
            raise IndexError(f"key {key} is outside 0..{len(self._parent) - 1}")
        root = key
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[key] != root:
            next_key = self._parent[key]
            self._parent[key] = root
            key = next_key
        return root

    def connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def merge(self, x: int, y: int) -> None:
        """Join the sets holding ``x`` and ``y``."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        elif self._rank[x] < self._rank[y]:
            self._parent[x] = y
        else:
            self._parent[x] = y
            self._rank[y] += 1
        self._components -= 1


def kruskal(
    edges: Iterable[Edge | tuple[int, int, float]], vertex_count: int
) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they are chosen.

    Edges of equal weight keep their input order. The lightest edge is
    always taken.
    """
    ordered = sorted(
        (edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges),
        key=attrgetter("weight"),
    )
    forest = UnionFind(vertex_count)
    tree: list[Edge] = []
    for index, edge in enumerate(ordered):
        if index == 0 or not forest.connected(edge.start, edge.end):
            forest.merge(edge.start, edge.end)
            tree.append(edge)
    return tree