"""Binary trees: depth measurement and downward path sums."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def max_depth(root: TreeNode | None) -> int:
    """Return the number of levels in the tree, counted breadth first."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth


def _paths_from(node: TreeNode | None, remaining: int) -> int:
    if node is None:
        return 0
    rest = remaining - node.val
    return int(rest == 0) + _paths_from(node.left, rest) + _paths_from(node.right, rest)


def path_sum(root: TreeNode | None, target_sum: int) -> int:
    """Count downward paths, starting at any node, whose values add up to ``target_sum``."""
    if root is None:
        return 0
    return (
        _paths_from(root, target_sum)
        + path_sum(root.left, target_sum)
        + path_sum(root.right, target_sum)
    )