"""Array algorithms: two pointers, counting and in-place reordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import pairwise


def anagram_mappings(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Map each element of ``nums1`` to an index where it appears in ``nums2``.

    Values missing from ``nums2`` map to 0.
    """
    positions = {num: index for index, num in enumerate(nums2)}
    return [positions.get(num, 0) for num in nums1]


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        previous = last_seen.get(num)
        if previous is not None and index - previous <= k:
            return True
        last_seen[num] = index
    return False


def find_length_of_lcis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing contiguous run."""
    if len(nums) <= 1:
        return len(nums)
    best = run = 1
    for prev, cur in pairwise(nums):
        run = run + 1 if cur > prev else 1
        best = max(best, run)
    return best


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of a peak: the first occurrence of the largest value."""
    return max(range(len(nums)), key=nums.__getitem__, default=0)


def is_majority_element(nums: Sequence[int], target: int) -> bool:
    """Return True if ``target`` fills more than half of ``nums``."""
    return Counter(nums)[target] > len(nums) // 2


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    i, j = 0, len(height) - 1
    best = 0
    while i < j:
        best = max(best, min(height[i], height[j]) * (j - i))
        if height[i] < height[j]:
            i += 1
        else:
            j -= 1
    return best


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Return the largest ``|a - b|`` with ``a`` and ``b`` from different sorted arrays."""
    if not arrays:
        return 0
    lowest, highest = arrays[0][0], arrays[0][-1]
    best = 0
    for array in arrays[1:]:
        cur_min, cur_max = array[0], array[-1]
        best = max(best, abs(cur_min - highest), abs(cur_max - lowest))
        lowest = min(lowest, cur_min)
        highest = max(highest, cur_max)
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values that sums to zero."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                result.append([first, values[j], values[k]])
                while j < k and values[j] == values[j + 1]:
                    j += 1
                while k > j and values[k] == values[k - 1]:
                    k -= 1
                j += 1
                k -= 1
    return result


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two values in sorted ``numbers`` summing to ``target``.

    Returns ``[-1, -1]`` when no such pair exists.
    """
    i, j = 0, len(numbers) - 1
    while i < j:
        total = numbers[i] + numbers[j]
        if total == target:
            return [i + 1, j + 1]
        if total > target:
            j -= 1
        else:
            i += 1
    return [-1, -1]


def wiggle_sort(nums: MutableSequence[int]) -> None:
    """Reorder ``nums`` in place so that ``nums[0] <= nums[1] >= nums[2] <= ...``."""
    nums.sort()
    for i in range(1, len(nums) - 1, 2):
        nums[i], nums[i + 1] = nums[i + 1], nums[i]