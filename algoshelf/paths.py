"""Weighted shortest paths and negative-cycle detection."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable

WeightedEdge = tuple[int, int, float]


def dijkstra(
    vertex_count: int, edges: Iterable[WeightedEdge], start: int
) -> list[float]:
    """Shortest distances from ``start`` to vertices ``0..vertex_count-1``.

    Edges are undirected. Edges may mention vertices beyond the reported
    range; paths through them still count. Unreachable vertices get
    ``math.inf``.
    """
    if not 0 <= start < vertex_count:
        raise ValueError(f"start vertex {start} is outside 0..{vertex_count - 1}")
    adjacency: dict[int, list[tuple[int, float]]] = defaultdict(list)
    for u, v, weight in edges:
        if u < 0 or v < 0:
            raise ValueError("vertices must not be negative")
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    distance: dict[int, float] = {start: 0}
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        dist, vertex = heapq.heappop(heap)
        if dist > distance[vertex]:
            continue
        for neighbour, weight in adjacency.get(vertex, ()):
            candidate = dist + weight
            if candidate < distance.get(neighbour, math.inf):
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return [distance.get(vertex, math.inf) for vertex in range(vertex_count)]


def has_negative_cycle(vertex_count: int, edges: Iterable[WeightedEdge]) -> bool:
    """Whether a negative cycle is reachable from vertex 0 (Bellman-Ford).

    Edges are directed. Relaxation runs ``vertex_count - 1`` rounds, stopping
    early once nothing changes; a further change afterwards means a cycle.
    """
    if vertex_count < 1:
        raise ValueError("a graph needs at least one vertex")
    edge_list = list(edges)
    distance: dict[int, float] = {0: 0}

    def relax() -> int:
        changes = 0
        for u, v, weight in edge_list:
            if u in distance and distance[u] + weight < distance.get(v, math.inf):
                distance[v] = distance[u] + weight
                changes += 1
        return changes

    changes = 0
    for _ in range(vertex_count - 1):
        changes = relax()
        if not changes:
            break
    if not changes:
        return False
    return relax() > 0