"""Singly linked list algorithms."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from algokit.nodes import ListNode


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(next=head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        if cur.next.val == cur.next.next.val:
            repeated = cur.next.val
            while cur.next is not None and cur.next.val == repeated:
                cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def _nth(node: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Return the n-th node counting ``node`` as the first; ``node`` itself if n <= 0."""
    if node is None or n <= 0:
        return node
    for _ in range(n - 1):
        if node is None:
            break
        node = node.next
    return node


def delete_nodes(head: Optional[ListNode], m: int, n: int) -> Optional[ListNode]:
    """Repeatedly keep ``m`` nodes and then drop the following ``n``."""
    start = head
    while True:
        kept = _nth(start, m)
        if kept is None:
            break
        dropped = _nth(kept.next, n)
        if dropped is None:
            kept.next = None
            break
        kept.next = dropped.next
        start = dropped.next
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_two_lists_recursive(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two ascending lists by picking the smaller head, then merging the rest."""
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    if list1.val < list2.val:
        list1.next = merge_two_lists(list1.next, list2)
        return list1
    list2.next = merge_two_lists(list2.next, list1)
    return list2


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of ascending lists into one."""
    merged: Optional[ListNode] = None
    for head in lists:
        merged = merge_two_lists_recursive(merged, head)
    return merged


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below ``x`` ahead of the others, keeping each group's order."""
    small_dummy, big_dummy = ListNode(), ListNode()
    small, big = small_dummy, big_dummy
    while head is not None:
        if head.val >= x:
            big.next = head
            big = head
        else:
            small.next = head
            small = head
        head = head.next
    small.next = big_dummy.next
    big.next = None
    return small_dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node from the end of the list."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(next=head)
    lead: Optional[ListNode] = dummy
    trail = dummy
    for _ in range(n + 1):
        if lead is None:
            raise ValueError("n exceeds the length of the list")
        lead = lead.next
    while lead is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[assignment]
    trail.next = trail.next.next  # type: ignore[union-attr]
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder ``L0 L1 ... Ln`` into ``L0 Ln L1 Ln-1 ...`` in place."""
    if head is None or head.next is None:
        return
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while second is not None:
        first_next = first.next  # type: ignore[union-attr]
        second_next = second.next
        first.next = second  # type: ignore[union-attr]
        second.next = first_next
        first = first_next
        second = second_next


def reverse_after(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Keep the first ``max(k - 1, 1)`` nodes in place and reverse the rest."""
    if head is None:
        raise ValueError("cannot reverse part of an empty list")
    node = head
    for _ in range(k - 2):
        if node.next is None:
            raise ValueError("k exceeds the length of the list")
        node = node.next
    node.next = reverse_list(node.next)
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right."""
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    new_tail = tail
    for _ in range(length - k % length):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def _merge_sorted(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val > b.val:
            tail.next = b
            b = b.next
        else:
            tail.next = a
            a = a.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list ascending with a stable merge sort."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    mid = slow.next
    slow.next = None
    return _merge_sorted(sort_list(head), sort_list(mid))