"""Node types shared by the tree and linked-list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class Node:
    """A binary tree node that also links to its right neighbour on the same level."""

    val: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None
    next: Optional[Node] = None


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; return its head, or None if empty."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"