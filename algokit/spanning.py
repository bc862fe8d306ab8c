"""Minimum spanning trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from algokit.unionfind import UnionFind

WeightedGraph = Sequence[Sequence[tuple[int, float]]]


def kruskal(n: int, edges: Iterable[tuple[int, int, float]]) -> float:
    """Return the total weight of a minimum spanning forest over undirected edges."""
    sets = UnionFind(n)
    total: float = 0
    for a, b, weight in sorted(edges, key=lambda edge: edge[2]):
        if not sets.connected(a, b):
            sets.union(a, b)
            total += weight
    return total


def prim(graph: WeightedGraph) -> float:
    """Return the weight of a minimum spanning tree of the component holding node 0.

    The graph is an undirected adjacency list of ``(neighbour, weight)`` pairs.
    """
    if not graph:
        return 0
    visited = [False] * len(graph)
    heap: list[tuple[float, int]] = [(0, 0)]
    total: float = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in graph[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total