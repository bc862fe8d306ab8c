"""Binary search tree insertion and deletion on TreeNode trees."""

from __future__ import annotations

from typing import Any

from algokit.binarytree import TreeNode


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the left."""
    if root is None:
        return TreeNode(value)
    if value > root.val:
        root.right = bst_insert(root.right, value)
    else:
        root.left = bst_insert(root.left, value)
    return root


def bst_min(root: TreeNode | None) -> TreeNode:
    """Return the node holding the smallest value."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root


def bst_delete(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Remove one node holding ``value`` and return the new root.

    A node with two children takes its inorder successor's value. A value
    not in the tree leaves it unchanged.
    """
    if root is None:
        return None
    if value > root.val:
        root.right = bst_delete(root.right, value)
    elif value < root.val:
        root.left = bst_delete(root.left, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        root.val = bst_min(root.right).val
        root.right = bst_delete(root.right, root.val)
    return root