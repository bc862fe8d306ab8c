"""Binary trees: construction, traversals, shape checks and views."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child.

    Only present nodes have entries for their children, so trailing gaps may
    be left out.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        visit(node.left)
        result.append(node.val)
        visit(node.right)

    visit(root)
    return result


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the inorder values using an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        result.append(node.val)
        current = node.right
    return result


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        result.append(node.val)
        visit(node.left)
        visit(node.right)

    visit(root)
    return result


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the preorder values using an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        result.append(node.val)

    visit(root)
    return result


def postorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the postorder values by reversing a node, right, left walk."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def balanced_height(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the inorder values are strictly increasing."""
    values = inorder_iterative(root)
    return all(a < b for a, b in zip(values, values[1:]))


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` as descendants.

    Both nodes are assumed to be in the tree; a node counts as its own
    descendant.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if right is None:
        return left
    if left is None:
        return right
    return root


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""

    def mirrored(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return a.val == b.val and mirrored(a.left, b.right) and mirrored(a.right, b.left)

    return root is None or mirrored(root.left, root.right)


def path_to(root: TreeNode | None, value: Any) -> list[Any]:
    """Return the values from the root down to the first node holding ``value``.

    The search goes left before right; an empty list means not found.
    """
    path: list[Any] = []

    def search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == value or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    search(root)
    return path


def _columns(root: TreeNode | None, keep_first: bool) -> list[Any]:
    if root is None:
        return []
    seen: dict[int, Any] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        if not keep_first or column not in seen:
            seen[column] = node.val
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [seen[column] for column in sorted(seen)]


def top_view(root: TreeNode | None) -> list[Any]:
    """Return, left to right, the first node seen in each vertical column."""
    return _columns(root, keep_first=True)


def bottom_view(root: TreeNode | None) -> list[Any]:
    """Return, left to right, the last node seen level by level in each column."""
    return _columns(root, keep_first=False)


def _levels(root: TreeNode | None, right_first: bool) -> list[Any]:
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if level == len(result):
            result.append(node.val)
        children = (node.right, node.left) if right_first else (node.left, node.right)
        queue.extend((child, level + 1) for child in children if child is not None)
    return result


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the leftmost value of each level, top to bottom."""
    return _levels(root, right_first=False)


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the rightmost value of each level, top to bottom."""
    return _levels(root, right_first=True)


def make_children_sum(root: TreeNode | None) -> None:
    """Raise values in place so each inner node equals the sum of its children.

    No value ever decreases; leaves keep their (possibly raised) values.
    """

    def push_down(node: TreeNode | None) -> None:
        if node is None or (node.left is None and node.right is None):
            return
        children = sum(child.val for child in (node.left, node.right) if child is not None)
        if node.val > children:
            target = node.left if node.left is not None else node.right
            assert target is not None
            target.val += node.val - children
        push_down(node.left)
        push_down(node.right)

    def pull_up(node: TreeNode | None) -> Any:
        if node is None:
            return 0
        if node.left is None and node.right is None:
            return node.val
        node.val = pull_up(node.left) + pull_up(node.right)
        return node.val

    push_down(root)
    pull_up(root)