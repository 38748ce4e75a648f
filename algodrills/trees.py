"""Routines on binary trees."""

from __future__ import annotations

from typing import Optional

from algodrills.nodes import TreeNode


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a binary search tree with strictly ordered keys."""
    pending = [(root, None, None)]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        pending.append((node.left, low, node.val))
        pending.append((node.right, node.val, high))
    return True


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The last value of each level, from the root downwards."""
    result: list[int] = []
    level = [root] if root is not None else []
    while level:
        result.append(level[-1].val)
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return result


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node that has both ``p`` and ``q`` in its subtree."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right