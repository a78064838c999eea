"""Binary tree construction, transformation and queries."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Optional

from algokit.nodes import Node, TreeNode


def _root_index(inorder: Sequence[int], value: int) -> int:
    try:
        return inorder.index(value)
    except ValueError:
        raise ValueError(f"value {value!r} is missing from the inorder sequence") from None


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    if not preorder:
        return None
    value = preorder[0]
    i = _root_index(inorder, value)
    return TreeNode(
        value,
        build_tree(preorder[1 : i + 1], inorder[:i]),
        build_tree(preorder[i + 1 :], inorder[i + 1 :]),
    )


def build_tree_from_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a binary tree from its inorder and postorder traversals."""
    if len(inorder) != len(postorder):
        raise ValueError("inorder and postorder must have the same length")
    if not inorder:
        return None
    value = postorder[-1]
    i = _root_index(inorder, value)
    return TreeNode(
        value,
        build_tree_from_postorder(inorder[:i], postorder[:i]),
        build_tree_from_postorder(inorder[i + 1 :], postorder[i:-1]),
    )


def connect(root: Optional[Node]) -> Optional[Node]:
    """Point every node's ``next`` at its right neighbour on the same level."""
    level = [root] if root is not None else []
    while level:
        for left, right in pairwise(level):
            left.next = right
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root


def _left_depth(node: Optional[TreeNode]) -> int:
    depth = 0
    while node is not None:
        depth += 1
        node = node.left
    return depth


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree."""
    total = 0
    node = root
    while node is not None:
        left = _left_depth(node.left)
        right = _left_depth(node.right)
        if left == right:
            total += 1 << left
            node = node.right
        else:
            total += 1 << right
            node = node.left
    return total


def flatten(root: Optional[TreeNode]) -> None:
    """Turn the tree in place into a right-leaning chain in preorder."""
    if root is None:
        return
    flatten(root.left)
    flatten(root.right)
    left, right = root.left, root.right
    root.left = None
    root.right = left
    tail = root
    while tail.right is not None:
        tail = tail.right
    tail.right = right


def flip_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    flip_tree(root.left)
    flip_tree(root.right)
    return root


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap every node's children in place and return the root."""
    if root is None:
        return None
    left, right = root.left, root.right
    root.left, root.right = right, left
    invert_tree(left)
    invert_tree(right)
    return root


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Return True if some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is None and q is None
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` (matched by value) below it."""
    if root is None or root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from an ascending sequence."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(
        nums[mid],
        sorted_array_to_bst(nums[:mid]),
        sorted_array_to_bst(nums[mid + 1 :]),
    )


def _path_numbers(node: Optional[TreeNode], prefix: int) -> int:
    if node is None:
        return 0
    value = prefix * 10 + node.val
    if node.left is None and node.right is None:
        return value
    return _path_numbers(node.left, value) + _path_numbers(node.right, value)


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits along every root-to-leaf path."""
    return _path_numbers(root, 0)