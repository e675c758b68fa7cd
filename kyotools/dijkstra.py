"""Single-source shortest paths on graphs with non-negative edge costs."""

from __future__ import annotations

import heapq
from typing import Sequence

INF = 1 << 60
"""Distance reported for vertices that cannot be reached."""


def dijkstra(graph: Sequence[Sequence[tuple[int, int]]], start: int) -> list[int]:
    """Return shortest distances from ``start``.

    ``graph[v]`` lists ``(to, cost)`` edges leaving ``v``. Unreachable
    vertices get :data:`INF`.
    """
    n = len(graph)
    if not 0 <= start < n:
        raise IndexError(f"start vertex {start} out of range for {n} vertices")
    dist = [INF] * n
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, v = heapq.heappop(heap)
        if d > dist[v]:
            continue
        for to, cost in graph[v]:
            nd = d + cost
            if nd < dist[to]:
                dist[to] = nd
                heapq.heappush(heap, (nd, to))
    return dist