from itertools import pairwise

import pytest

from algokit.arrays import (
    anagram_mappings,
    contains_nearby_duplicate,
    find_length_of_lcis,
    find_peak_element,
    is_majority_element,
    max_area,
    max_distance,
    three_sum,
    two_sum_sorted,
    wiggle_sort,
)


@pytest.mark.parametrize(
    "nums1, nums2",
    [
        ([12, 28, 46, 32, 50], [50, 12, 32, 46, 28]),
        ([84, 46], [84, 46]),
        ([5, 5, 1], [1, 5, 5]),
    ],
)
def test_anagram_mappings_points_at_equal_values(nums1, nums2):
    mapping = anagram_mappings(nums1, nums2)
    assert len(mapping) == len(nums1)
    assert [nums2[j] for j in mapping] == nums1


def test_contains_nearby_duplicate_cases():
    assert contains_nearby_duplicate([1, 2, 3, 1], 3)
    assert contains_nearby_duplicate([1, 0, 1, 1], 1)
    assert not contains_nearby_duplicate([1, 2, 3, 1, 2, 3], 2)
    assert not contains_nearby_duplicate([], 5)


def test_contains_nearby_duplicate_monotone_in_k():
    nums = [4, 1, 7, 4, 9, 1]
    results = [contains_nearby_duplicate(nums, k) for k in range(len(nums) + 1)]
    assert all(not a or b for a, b in pairwise(results))
    assert results[-1]


def test_find_length_of_lcis_short_inputs():
    assert find_length_of_lcis([]) == 0
    assert find_length_of_lcis([7]) == 1


def test_find_length_of_lcis_increasing_is_whole_length():
    nums = [1, 2, 5, 9, 11]
    assert find_length_of_lcis(nums) == len(nums)


def test_find_length_of_lcis_equal_values_do_not_extend():
    assert find_length_of_lcis([2, 2, 2, 2, 2]) == find_length_of_lcis([2])


def test_find_length_of_lcis_bounded_by_pieces():
    left, right = [1, 3, 5], [4, 7]
    assert find_length_of_lcis(left + right) == max(len(left), len(right))


@pytest.mark.parametrize("nums", [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5], [3, 2, 1]])
def test_find_peak_element_is_peak(nums):
    index = find_peak_element(nums)
    assert nums[index] == max(nums)
    if index > 0:
        assert nums[index] > nums[index - 1]
    if index < len(nums) - 1:
        assert nums[index] > nums[index + 1]


def test_is_majority_element():
    assert is_majority_element([2, 4, 5, 5, 5, 5, 5, 6, 6], 5)
    assert not is_majority_element([10, 100, 101, 101], 101)
    assert not is_majority_element([], 1)


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_area_two_lines_and_symmetry():
    assert max_area([3, 5]) == 3
    heights = [2, 9, 4, 7, 1, 6]
    assert max_area(heights) == max_area(heights[::-1])
    assert max_area([4]) == 0


def test_max_distance_examples():
    assert max_distance([[1, 2, 3], [4, 5], [1, 2, 3]]) == 4
    assert max_distance([[1], [1]]) == 0
    assert max_distance([]) == 0


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_invariants_and_input_untouched():
    nums = [0, 0, 0, 0, 3, -3, 1, -1, 2, -2]
    original = list(nums)
    triples = three_sum(nums)
    assert nums == original
    assert triples
    assert all(sum(t) == 0 and t == sorted(t) for t in triples)
    assert len({tuple(t) for t in triples}) == len(triples)


def test_three_sum_none():
    assert three_sum([0, 1, 1]) == []


def test_two_sum_sorted_finds_pair():
    numbers = [2, 7, 11, 15]
    i, j = two_sum_sorted(numbers, 9)
    assert 1 <= i < j <= len(numbers)
    assert numbers[i - 1] + numbers[j - 1] == 9


def test_two_sum_sorted_missing():
    assert two_sum_sorted([1, 2, 3], 100) == [-1, -1]


@pytest.mark.parametrize("nums", [[3, 5, 2, 1, 6, 4], [6, 6, 5, 6, 3, 8], [1], []])
def test_wiggle_sort_invariant(nums):
    original = sorted(nums)
    wiggle_sort(nums)
    assert sorted(nums) == original
    for i, (a, b) in enumerate(pairwise(nums)):
        if i % 2 == 0:
            assert a <= b
        else:
            assert a >= b