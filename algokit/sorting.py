"""In-place sorting routines and order statistics."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_non_negative(values: Sequence[int]) -> None:
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")


def counting_sort_naive(nums: MutableSequence[int]) -> None:
    """Write the distinct values of ``nums`` in ascending order to its front, in place.

    Positions past the number of distinct values keep what they held.
    """
    _check_non_negative(nums)
    present = set(nums)
    for index, value in enumerate(sorted(present)):
        nums[index] = value


def _lomuto(arr: MutableSequence[int], low: int, high: int) -> int:
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def _hoare(arr: MutableSequence[int], low: int, high: int) -> int:
    i, j = low, high
    while i < j:
        while i < j and arr[j] >= arr[low]:
            j -= 1
        while i < j and arr[i] <= arr[low]:
            i += 1
        arr[i], arr[j] = arr[j], arr[i]
    arr[i], arr[low] = arr[low], arr[i]
    return i


def find_kth_largest(nums: MutableSequence[int], k: int) -> int:
    """Return the k-th largest value by quickselect; ``nums`` is reordered in place."""
    n = len(nums)
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and the number of values")
    low, high, index = 0, n - 1, n - k
    while True:
        mid = _lomuto(nums, low, high)
        if mid == index:
            return nums[mid]
        if mid > index:
            high = mid - 1
        else:
            low = mid + 1


def quick_sort(arr: MutableSequence[int], low: int, high: int) -> None:
    """Sort ``arr[low..high]`` in place, pivoting on the first element of each range."""
    if low < high:
        pivot = _hoare(arr, low, high)
        quick_sort(arr, low, pivot - 1)
        quick_sort(arr, pivot + 1, high)


def quick_sort_lomuto(arr: MutableSequence[int], low: int, high: int) -> None:
    """Sort ``arr[low..high]`` in place, pivoting on the last element of each range."""
    if low < high:
        pivot = _lomuto(arr, low, high)
        quick_sort_lomuto(arr, low, pivot - 1)
        quick_sort_lomuto(arr, pivot + 1, high)


def simple_bucket(arr: Sequence[int]) -> list[int]:
    """Return the distinct non-negative values of ``arr`` in ascending order."""
    if len(arr) <= 1:
        return list(arr)
    _check_non_negative(arr)
    return sorted(set(arr))