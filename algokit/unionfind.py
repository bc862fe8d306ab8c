"""Disjoint-set forest with path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the integers ``0 .. n-1``.

    Sets are merged by size, or by rank when ``by_rank`` is true.
    """

    def __init__(self, n: int, by_rank: bool = False) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._weight = [1] * n
        self._by_rank = by_rank

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        weight = self._weight
        if self._by_rank:
            if weight[root_a] > weight[root_b]:
                self._parent[root_b] = root_a
            elif weight[root_b] > weight[root_a]:
                self._parent[root_a] = root_b
            else:
                self._parent[root_b] = root_a
                weight[root_a] += 1
        elif weight[root_a] > weight[root_b]:
            self._parent[root_b] = root_a
            weight[root_a] += weight[root_b]
        else:
            self._parent[root_a] = root_b
            weight[root_b] += weight[root_a]

    def connected(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)