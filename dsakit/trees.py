"""Binary trees: level-order construction, level-order listing and BST lookup."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

ABSENT = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _next_child(values: Iterator) -> TreeNode | None:
    try:
        value = next(values)
    except StopIteration:
        raise ValueError("values ended before every node's children were given") from None
    if value is None or value == ABSENT:
        return None
    return TreeNode(value)


def build_level_order(values: Iterable) -> TreeNode:
    """Build a tree from values in level order, ``-1`` (or ``None``) marking a missing child."""
    remaining = iter(values)
    try:
        root = TreeNode(next(remaining))
    except StopIteration:
        raise ValueError("no value for the root") from None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = _next_child(remaining)
        if node.left is not None:
            queue.append(node.left)
        node.right = _next_child(remaining)
        if node.right is not None:
            queue.append(node.right)
    return root


def level_order_lines(root: TreeNode | None) -> list[str]:
    """Describe each node in level order as ``data:`` followed by ``L<left>`` and ``R<right>``."""
    lines: list[str] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        line = f"{node.data}:"
        if node.left is not None:
            line += f"L{node.left.data}"
            queue.append(node.left)
        if node.right is not None:
            line += f"R{node.right.data}"
            queue.append(node.right)
        lines.append(line)
    return lines


def bst_contains(root: TreeNode | None, value) -> bool:
    """Return whether ``value`` is in the binary search tree rooted at ``root``."""
    node = root
    while node is not None:
        if node.data == value:
            return True
        node = node.left if value < node.data else node.right
    return False