"""Binary search over sorted and rotated arrays."""

from __future__ import annotations

from collections.abc import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted array of distinct values, or -1."""
    if not nums:
        return -1
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    start = left
    left, right = 0, len(nums) - 1
    if nums[start] <= target <= nums[right]:
        left = start
    else:
        right = start
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def take_attendance(records: Sequence[int]) -> int:
    """Return the one number missing from a sorted run ``0..n``."""
    i, j = 0, len(records) - 1
    while i <= j:
        mid = (i + j) // 2
        if records[mid] == mid:
            i = mid + 1
        else:
            j = mid - 1
    return i


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return left