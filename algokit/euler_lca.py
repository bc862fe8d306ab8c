"""Lowest common ancestor via an Euler tour and range-minimum queries."""

from __future__ import annotations

from collections.abc import Sequence


class EulerLCA:
    """Answers lowest-common-ancestor queries on a rooted tree.

    The tree is given as an undirected adjacency list; each query takes
    constant time after building a sparse table over the Euler tour.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adjacency)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        self._depth = [0] * n
        self._first: list[int | None] = [None] * n
        tour: list[int] = []

        visited = [False] * n
        visited[root] = True
        self._first[root] = 0
        tour.append(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for child in neighbours:
                if not visited[child]:
                    visited[child] = True
                    self._depth[child] = self._depth[node] + 1
                    self._first[child] = len(tour)
                    tour.append(child)
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                stack.pop()
                if stack:
                    tour.append(stack[-1][0])

        self._table = [tour]
        span = 1
        while 2 * span <= len(tour):
            previous = self._table[-1]
            self._table.append(
                [self._shallower(previous[i], previous[i + span]) for i in range(len(tour) - 2 * span + 1)]
            )
            span *= 2

    def _shallower(self, a: int, b: int) -> int:
        return a if self._depth[a] < self._depth[b] else b

    def _position(self, node: int) -> int:
        if not 0 <= node < len(self._first):
            raise IndexError(f"node {node} out of range")
        position = self._first[node]
        if position is None:
            raise ValueError(f"node {node} is not reachable from the root")
        return position

    def lca(self, u: int, v: int) -> int:
        """Return the deepest node that is an ancestor of both ``u`` and ``v``."""
        left, right = sorted((self._position(u), self._position(v)))
        level = (right - left + 1).bit_length() - 1
        row = self._table[level]
        return self._shallower(row[left], row[right - (1 << level) + 1])