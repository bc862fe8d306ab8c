"""Segment tree answering range-minimum queries with point updates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MinSegmentTree:
    """Range minimum over a fixed-length sequence."""

    def __init__(self, values: Iterable[Any]) -> None:
        leaves = list(values)
        if not leaves:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(leaves)
        self._tree: list[Any] = [None] * self._size + leaves
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range")

    def query(self, left: int, right: int) -> Any:
        """Return the minimum of positions ``left .. right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise IndexError("left bound exceeds right bound")
        lo, hi = left + self._size, right + self._size + 1
        best = None
        while lo < hi:
            if lo & 1:
                best = self._tree[lo] if best is None else min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = self._tree[hi] if best is None else min(best, self._tree[hi])
            lo >>= 1
            hi >>= 1
        return best

    def update(self, pos: int, value: Any) -> None:
        """Set position ``pos`` to ``value``."""
        self._check(pos)
        node = pos + self._size
        self._tree[node] = value
        node >>= 1
        while node:
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])
            node >>= 1