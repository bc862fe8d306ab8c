"""Dynamic programming on trees by rerooting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def sum_of_distances(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """For each node of a tree, return the sum of its distances to all other nodes.

    ``edges`` are the ``n - 1`` undirected edges of a tree on nodes ``0 .. n-1``.
    Raises ValueError if they do not form a tree.
    """
    if n < 0:
        raise ValueError("number of nodes must not be negative")
    if n == 0:
        return []
    adjacency: list[list[int]] = [[] for _ in range(n)]
    count = 0
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(f"edge {a}-{b} out of range")
        adjacency[a].append(b)
        adjacency[b].append(a)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")

    parent = [-1] * n
    order = [0]
    seen = [False] * n
    seen[0] = True
    for node in order:
        for child in adjacency[node]:
            if not seen[child]:
                seen[child] = True
                parent[child] = node
                order.append(child)
    if len(order) != n:
        raise ValueError("edges do not connect all nodes")

    subtree = [1] * n
    below = [0] * n
    for node in reversed(order[1:]):
        up = parent[node]
        subtree[up] += subtree[node]
        below[up] += below[node] + subtree[node]

    answer = [0] * n
    answer[0] = below[0]
    for node in order[1:]:
        answer[node] = answer[parent[node]] - subtree[node] + (n - subtree[node])
    return answer