"""Single-source and all-pairs shortest paths.

Unreachable nodes have distance ``math.inf``. Weighted adjacency lists
hold ``(neighbour, weight)`` pairs for each node.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

WeightedGraph = Sequence[Sequence[tuple[int, float]]]
Edge = tuple[int, int, float]


def _check_node(n: int, node: int) -> None:
    if not 0 <= node < n:
        raise IndexError(f"node {node} out of range")


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` over directed, possibly negative, edges.

    Relaxation runs for at most ``n`` rounds; negative cycles are not reported.
    """
    _check_node(n, source)
    edge_list = list(edges)
    for start, end, _ in edge_list:
        _check_node(n, start)
        _check_node(n, end)
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n):
        changed = False
        for start, end, weight in edge_list:
            if dist[start] != math.inf and dist[start] + weight < dist[end]:
                dist[end] = dist[start] + weight
                changed = True
        if not changed:
            break
    return dist


def dijkstra(graph: WeightedGraph, source: int = 0) -> list[float]:
    """Return distances from ``source`` over non-negative edge weights."""
    _check_node(len(graph), source)
    dist: list[float] = [math.inf] * len(graph)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        current, node = heapq.heappop(heap)
        if current > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = current + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def dijkstra_distance(graph: WeightedGraph, start: int, end: int) -> float:
    """Return the distance from ``start`` to ``end``, stopping once ``end`` is settled."""
    _check_node(len(graph), start)
    _check_node(len(graph), end)
    dist: list[float] = [math.inf] * len(graph)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        current, node = heapq.heappop(heap)
        if node == end:
            return dist[end]
        if current > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = current + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return math.inf


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list[float]]:
    """Return the matrix of distances between all pairs over undirected edges.

    Of several edges between the same pair, the lightest one counts.
    """
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for a, b, weight in edges:
        _check_node(n, a)
        _check_node(n, b)
        dist[a][b] = min(dist[a][b], weight)
        dist[b][a] = min(dist[b][a], weight)
    for node in range(n):
        dist[node][node] = 0
    for via in range(n):
        via_row = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for target, through in enumerate(via_row):
                if to_via + through < row[target]:
                    row[target] = to_via + through
    return dist