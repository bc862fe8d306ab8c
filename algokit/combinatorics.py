"""Subsets and permutations of a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def subsets(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield every subset, in bitmask order: subset ``m`` holds item ``i`` when bit ``i`` of ``m`` is set."""
    pool = list(items)
    for mask in range(1 << len(pool)):
        yield [item for bit, item in enumerate(pool) if mask >> bit & 1]


def next_permutation(items: Iterable[Any]) -> list[Any] | None:
    """Return the lexicographically next arrangement, or None if ``items`` is the last one."""
    seq = list(items)
    pivot = next((i for i in range(len(seq) - 2, -1, -1) if seq[i] < seq[i + 1]), None)
    if pivot is None:
        return None
    swap = next(j for j in range(len(seq) - 1, pivot, -1) if seq[j] > seq[pivot])
    seq[pivot], seq[swap] = seq[swap], seq[pivot]
    seq[pivot + 1 :] = reversed(seq[pivot + 1 :])
    return seq


def sorted_permutations(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield the distinct arrangements of ``items`` in lexicographic order."""
    current: list[Any] | None = sorted(items)
    while current is not None:
        yield list(current)
        current = next_permutation(current)


def permutations(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield every ordering of the items by position, repeats included."""
    pool = list(items)
    used = [False] * len(pool)
    chosen: list[Any] = []

    def extend() -> Iterator[list[Any]]:
        if len(chosen) == len(pool):
            yield list(chosen)
            return
        for index, item in enumerate(pool):
            if used[index]:
                continue
            used[index] = True
            chosen.append(item)
            yield from extend()
            chosen.pop()
            used[index] = False

    yield from extend()