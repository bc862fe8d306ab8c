"""Traversals and simple checks over adjacency-list graphs.

A graph is a sequence whose item ``i`` lists the neighbours of node ``i``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]


class NotBipartiteError(ValueError):
    """Raised when a graph cannot be coloured with two colours."""


def _check_node(graph: Graph, node: int) -> None:
    if not 0 <= node < len(graph):
        raise IndexError(f"node {node} out of range")


def bfs(graph: Graph, start: int = 0) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    _check_node(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in graph[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def _dfs_into(graph: Graph, start: int, visited: list[bool], order: list[int]) -> None:
    visited[start] = True
    order.append(start)
    stack = [iter(graph[start])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()


def dfs(graph: Graph, start: int = 0) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    _check_node(graph, start)
    order: list[int] = []
    _dfs_into(graph, start, [False] * len(graph), order)
    return order


def dfs_forest(graph: Graph) -> list[int]:
    """Return every node in depth-first preorder, starting a new tree at each unvisited node."""
    visited = [False] * len(graph)
    order: list[int] = []
    for node in range(len(graph)):
        if not visited[node]:
            _dfs_into(graph, node, visited, order)
    return order


def two_color(graph: Graph) -> list[int]:
    """Colour an undirected graph with colours 0 and 1 so no edge joins equal colours.

    Each component's lowest node gets colour 0. Raises NotBipartiteError
    when no such colouring exists.
    """
    colors: list[int | None] = [None] * len(graph)
    for root in range(len(graph)):
        if colors[root] is not None:
            continue
        colors[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if colors[neighbour] == colors[node]:
                    raise NotBipartiteError(
                        f"edge {node}-{neighbour} joins nodes of the same colour"
                    )
                if colors[neighbour] is None:
                    colors[neighbour] = 1 - colors[node]
                    stack.append(neighbour)
    return [c for c in colors if c is not None]


def has_cycle(graph: Graph) -> bool:
    """Tell whether a directed graph contains a cycle."""
    visited = [False] * len(graph)
    on_path = [False] * len(graph)
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if on_path[neighbour]:
                    return True
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False