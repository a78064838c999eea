"""Monotonic-stack algorithms."""

from __future__ import annotations

from collections.abc import Sequence


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the next larger value after it in ``nums2``.

    A value with nothing larger to its right maps to -1.
    """
    next_greater: dict[int, int] = {}
    stack: list[int] = []
    for num in nums2:
        while stack and stack[-1] < num:
            next_greater[stack.pop()] = num
        stack.append(num)
    next_greater.update((num, -1) for num in stack)
    return [next_greater.get(num, 0) for num in nums1]


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    if not 0 <= k <= len(num):
        raise ValueError("k must be between 0 and the number of digits")
    stack: list[str] = []
    for digit in num:
        while k and stack and digit < stack[-1]:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"