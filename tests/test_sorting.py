import random

import pytest

from algokit.sorting import (
    counting_sort_naive,
    find_kth_largest,
    quick_sort,
    quick_sort_lomuto,
    simple_bucket,
)


def _random_list(seed, size=40):
    rng = random.Random(seed)
    return [rng.randint(-50, 50) for _ in range(size)]


def test_counting_sort_naive_case():
    nums = [1, 5, 4, 3]
    counting_sort_naive(nums)
    assert nums == [1, 3, 4, 5]


def test_counting_sort_naive_duplicates_fill_front_only():
    nums = [2, 2, 1]
    counting_sort_naive(nums)
    assert nums == [1, 2, 1]


def test_counting_sort_naive_empty():
    nums = []
    counting_sort_naive(nums)
    assert nums == []


def test_counting_sort_naive_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort_naive([3, -1])


def test_quick_sort_case():
    arr = [10, 7, 8, 9, 1, 5]
    quick_sort(arr, 0, len(arr) - 1)
    assert arr == [1, 5, 7, 8, 9, 10]


def test_quick_sort_lomuto_case():
    arr = [30, 20, 40]
    quick_sort_lomuto(arr, 0, len(arr) - 1)
    assert arr == [20, 30, 40]


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_lomuto])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_quick_sorts_match_sorted(sorter, seed):
    arr = _random_list(seed)
    expected = sorted(arr)
    sorter(arr, 0, len(arr) - 1)
    assert arr == expected


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_lomuto])
def test_quick_sorts_only_touch_range(sorter):
    arr = [5, 4, 3, 2, 1]
    sorter(arr, 1, 3)
    assert arr == [5, 2, 3, 4, 1]


def test_find_kth_largest_examples():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5
    assert find_kth_largest([3, 2, 3, 1, 2, 4, 5, 5, 6], 4) == 4


@pytest.mark.parametrize("seed", [4, 5])
def test_find_kth_largest_matches_sorted(seed):
    nums = _random_list(seed)
    ordered = sorted(nums, reverse=True)
    for k in range(1, len(nums) + 1):
        assert find_kth_largest(list(nums), k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_simple_bucket_case():
    assert simple_bucket([1, 3, 4, 5]) == [1, 3, 4, 5]


def test_simple_bucket_drops_duplicates():
    assert simple_bucket([3, 1, 3, 0]) == [0, 1, 3]


def test_simple_bucket_short_input_returned_as_is():
    assert simple_bucket([7]) == [7]
    assert simple_bucket([]) == []


def test_simple_bucket_rejects_negative():
    with pytest.raises(ValueError):
        simple_bucket([1, -2])