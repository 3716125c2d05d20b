"""Unweighted graph traversal: breadth-first, depth-first and topological orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class CycleError(ValueError):
    """Raised when a directed graph has no topological order."""


class Graph(Generic[T]):
    """Adjacency-list graph whose vertices are any hashable values."""

    def __init__(self) -> None:
        self._adjacency: dict[T, list[T]] = {}

    def add_edge(self, src: T, dest: T, bidirectional: bool = True) -> None:
        """Add an edge from ``src`` to ``dest``, and back again unless directed."""
        self._adjacency.setdefault(src, []).append(dest)
        if bidirectional:
            self._adjacency.setdefault(dest, []).append(src)

    def neighbours(self, vertex: T) -> list[T]:
        """Vertices reachable over one edge from ``vertex``, in insertion order."""
        return list(self._adjacency.get(vertex, ()))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex} -> " + "".join(f"{n} -> " for n in self._adjacency[vertex])
            for vertex in sorted(self._adjacency)
        )

    def bfs(self, src: T) -> list[T]:
        """Vertices reachable from ``src`` in breadth-first (level) order."""
        order: list[T] = []
        visited = {src}
        queue = deque([src])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency.get(vertex, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, src: T) -> list[T]:
        """Vertices reachable from ``src`` in depth-first preorder."""
        order = [src]
        visited = {src}
        stack: list[Iterator[T]] = [iter(self._adjacency.get(src, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def _adjacency_lists(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        for vertex in (src, dest):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        adjacency[src].append(dest)
    return adjacency


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices ``0..vertex_count-1`` by reversed depth-first finishing time.

    Vertices are started in increasing order. No cycle check is made.
    """
    adjacency = _adjacency_lists(vertex_count, edges)
    visited = [False] * vertex_count
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            vertex, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    return finished[::-1]


def kahn_topological_sort(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Topological order by repeatedly removing vertices of in-degree zero.

    Raises CycleError if the graph has a cycle.
    """
    adjacency = _adjacency_lists(vertex_count, edges)
    in_degree = [0] * vertex_count
    for targets in adjacency:
        for target in targets:
            in_degree[target] += 1

    queue = deque(v for v in range(vertex_count) if in_degree[v] == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in adjacency[vertex]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    if len(order) != vertex_count:
        raise CycleError("No topological sort possible, there exists a cycle")
    return order