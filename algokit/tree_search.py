"""Queries over binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from algokit.nodes import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean node value of each level, top to bottom."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def closest_k_values(root: Optional[TreeNode], target: float, k: int) -> list[int]:
    """Return the ``k`` values of a search tree nearest to ``target``, ascending."""
    if k < 1:
        raise ValueError("k must be positive")
    window: deque[int] = deque()
    for value in _inorder(root):
        if len(window) < k:
            window.append(value)
        elif abs(window[0] - target) > abs(value - target):
            window.popleft()
            window.append(value)
    return list(window)


def closest_value(root: Optional[TreeNode], target: float) -> int:
    """Return the search-tree value nearest to ``target``, the smaller one on a tie."""
    if root is None:
        raise ValueError("tree is empty")
    best = root.val
    node: Optional[TreeNode] = root
    while node is not None:
        cur = abs(node.val - target)
        prev = abs(best - target)
        if cur == prev:
            best = min(best, node.val)
        elif cur < prev:
            best = node.val
        node = node.left if target < node.val else node.right
    return best


def is_unival_tree(root: Optional[TreeNode]) -> bool:
    """Return True if every node holds the same value."""
    if root is None:
        return True
    for child in (root.left, root.right):
        if child is not None and child.val != root.val:
            return False
    return is_unival_tree(root.left) and is_unival_tree(root.right)


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along any path of one or more connected nodes."""
    if root is None:
        raise ValueError("tree is empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]