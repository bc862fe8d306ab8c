"""Topological ordering of directed graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from enum import Enum

Graph = Sequence[Sequence[int]]


class CycleError(ValueError):
    """Raised when a graph has a cycle and so no topological order."""


class _State(Enum):
    NEW = 0
    ON_PATH = 1
    DONE = 2


def kahn_sort(graph: Graph) -> list[int]:
    """Order the nodes by repeatedly removing those with no incoming edges."""
    indegree = [0] * len(graph)
    for neighbours in graph:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in graph[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    if len(order) != len(graph):
        raise CycleError("graph has a cycle")
    return order


def dfs_sort(graph: Graph) -> list[int]:
    """Order the nodes by reversed depth-first finishing time."""
    state = [_State.NEW] * len(graph)
    finished: list[int] = []
    for root in range(len(graph)):
        if state[root] is not _State.NEW:
            continue
        state[root] = _State.ON_PATH
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] is _State.ON_PATH:
                    raise CycleError("graph has a cycle")
                if state[neighbour] is _State.NEW:
                    state[neighbour] = _State.ON_PATH
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                state[node] = _State.DONE
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished