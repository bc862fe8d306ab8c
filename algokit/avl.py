"""Self-balancing AVL search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _largest(node: _Node) -> Any:
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node: _Node | None, value: Any) -> _Node | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is not None and node.right is not None:
        predecessor = _largest(node.left)
        node.value = predecessor
        node.left = _remove(node.left, predecessor)
    else:
        return node.left if node.left is not None else node.right
    return _rebalance(node)


class AVLTree:
    """A set of ordered values kept in a height-balanced search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    def insert(self, value: Any) -> None:
        """Add ``value``; a value already present is left alone."""
        if value in self:
            return
        self._root = _insert(self._root, value)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove ``value``; raises KeyError if it is not in the tree."""
        if value not in self:
            raise KeyError(value)
        self._root = _remove(self._root, value)
        self._size -= 1

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order."""
        result: list[Any] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            visit(node.left)
            result.append(node.value)
            visit(node.right)

        visit(self._root)
        return result

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result: list[Any] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            result.append(node.value)
            visit(node.left)
            visit(node.right)

        visit(self._root)
        return result

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        result: list[Any] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            visit(node.left)
            visit(node.right)
            result.append(node.value)

        visit(self._root)
        return result

    def level_order(self) -> list[Any]:
        """Return the values level by level, left to right."""
        if self._root is None:
            return []
        result: list[Any] = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return result