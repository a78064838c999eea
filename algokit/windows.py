"""Sliding-window algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the longest run of ones when at most one zero may be flipped."""
    best = start = zeros = 0
    for end, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > 1:
            if nums[start] == 0:
                zeros -= 1
            start += 1
        best = max(best, end - start + 1)
    return best


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Return the shortest contiguous subarray length with sum at least ``target``, or 0."""
    best: int | None = None
    total = start = 0
    for end, value in enumerate(nums):
        total += value
        while total >= target:
            length = end - start + 1
            best = length if best is None else min(best, length)
            total -= nums[start]
            start += 1
    return 0 if best is None else best


def num_k_len_substr_no_repeats(s: str, k: int) -> int:
    """Count substrings of length ``k`` with no repeated character."""
    if len(s) < k:
        return 0
    window: Counter[str] = Counter()
    left = count = 0
    for right, char in enumerate(s):
        window[char] += 1
        while right - left + 1 > k or window[char] > 1:
            window[s[left]] -= 1
            left += 1
        if right - left + 1 == k:
            count += 1
    return count