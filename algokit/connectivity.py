"""Bridges, strongly connected components and Eulerian paths."""

from __future__ import annotations

from collections.abc import Sequence

Graph = Sequence[Sequence[int]]


def bridges(graph: Graph) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph as ``(parent, child)`` pairs.

    Pairs come in the order the depth-first search finishes them.
    """
    n = len(graph)
    entry = [-1] * n
    low = [0] * n
    timer = 0
    found: list[tuple[int, int]] = []
    for root in range(n):
        if entry[root] != -1:
            continue
        entry[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(graph[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if entry[neighbour] == -1:
                    entry[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(graph[neighbour])))
                    break
                low[node] = min(low[node], entry[neighbour])
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[node])
                    if low[node] > entry[above]:
                        found.append((above, node))
    return found


def _finish_order(graph: Graph) -> list[int]:
    visited = [False] * len(graph)
    finished: list[int] = []
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Return the strongly connected components of a directed graph.

    Components come in topological order of the condensed graph; each lists
    its nodes in depth-first preorder over the reversed edges.
    """
    reverse: list[list[int]] = [[] for _ in graph]
    for node, neighbours in enumerate(graph):
        for neighbour in neighbours:
            reverse[neighbour].append(node)

    visited = [False] * len(graph)
    components: list[list[int]] = []
    for root in reversed(_finish_order(graph)):
        if visited[root]:
            continue
        visited[root] = True
        component = [root]
        stack = [iter(reverse[root])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(reverse[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def eulerian_path(graph: Graph) -> list[int]:
    """Return a walk of a directed graph that uses every edge once.

    The walk starts at the node with one more outgoing than incoming edge,
    or at node 0 when all are balanced. Raises ValueError when the degrees
    allow no such walk.
    """
    n = len(graph)
    if n == 0:
        return []
    out_degree = [len(neighbours) for neighbours in graph]
    in_degree = [0] * n
    for neighbours in graph:
        for neighbour in neighbours:
            in_degree[neighbour] += 1

    starts = ends = 0
    for out_count, in_count in zip(out_degree, in_degree):
        difference = out_count - in_count
        if difference == 1:
            starts += 1
        elif difference == -1:
            ends += 1
        elif difference != 0:
            raise ValueError("graph has no Eulerian path")
    if (starts, ends) not in ((0, 0), (1, 1)):
        raise ValueError("graph has no Eulerian path")

    start = next(
        (node for node in range(n) if out_degree[node] - in_degree[node] == 1), 0
    )
    remaining = out_degree
    stack = [start]
    path: list[int] = []
    while stack:
        node = stack[-1]
        if remaining[node]:
            remaining[node] -= 1
            stack.append(graph[node][remaining[node]])
        else:
            path.append(stack.pop())
    path.reverse()
    return path