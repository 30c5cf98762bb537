import math

import pytest

from algosuite.subarrays import (
    ProductOfNumbers,
    count_complete_subarrays,
    count_fair_pairs,
    count_good,
    count_interesting_subarrays,
    count_subarrays_with_max,
    is_zero_array,
    max_removal,
    min_sub_array_len,
    min_zero_array,
    number_of_alternating_groups,
)


def test_min_sub_array_len_unreachable():
    nums = [1, 2, 3]
    assert min_sub_array_len(sum(nums) + 1, nums) == 0


def test_min_sub_array_len_single_element_suffices():
    nums = [2, 9, 4, 1]
    assert min_sub_array_len(max(nums), nums) == 1


def test_min_sub_array_len_needs_everything():
    nums = [3, 1, 4, 1, 5]
    assert min_sub_array_len(sum(nums), nums) == len(nums)


def test_product_of_last_k():
    stream = ProductOfNumbers()
    added = [3, 2, 5, 4]
    for value in added:
        stream.add(value)
    for k in range(1, len(added) + 1):
        assert stream.get_product(k) == math.prod(added[-k:])


def test_product_after_zero():
    stream = ProductOfNumbers()
    for value in [3, 0, 2, 5]:
        stream.add(value)
    assert stream.get_product(2) == 10
    assert stream.get_product(3) == 0


def test_product_with_negatives():
    stream = ProductOfNumbers()
    added = [-2, 3, -4]
    for value in added:
        stream.add(value)
    assert stream.get_product(2) == math.prod(added[-2:])


@pytest.mark.parametrize("n", [2, 4, 7])
def test_count_good_all_equal(n):
    assert count_good([5] * n, 1) == math.comb(n, 2)


def test_count_good_distinct():
    assert count_good([1, 2, 3, 4], 1) == 0


def test_count_fair_pairs_wide_range():
    nums = [4, -1, 7, 0, 2]
    assert count_fair_pairs(nums, -(10**9), 10**9) == math.comb(len(nums), 2)


def test_count_fair_pairs_empty_range():
    assert count_fair_pairs([1, 2, 3], 100, 200) == 0


def test_count_fair_pairs_leaves_input_untouched():
    nums = [5, 1, 3]
    count_fair_pairs(nums, 0, 10)
    assert nums == [5, 1, 3]


@pytest.mark.parametrize("n", [1, 3, 6])
def test_count_complete_all_equal(n):
    assert count_complete_subarrays([2] * n) == n * (n + 1) // 2


def test_count_complete_all_distinct():
    assert count_complete_subarrays([1, 2, 3, 4]) == 1


def test_count_interesting_every_subarray():
    nums = [4, 8, 1, 6]
    n = len(nums)
    assert count_interesting_subarrays(nums, 1, 0) == n * (n + 1) // 2


def test_count_interesting_example():
    assert count_interesting_subarrays([3, 2, 4], 2, 1) == 3


@pytest.mark.parametrize("n", [1, 4])
def test_count_subarrays_with_max_all_equal(n):
    assert count_subarrays_with_max([7] * n, 1) == n * (n + 1) // 2


def test_count_subarrays_with_max_too_few():
    nums = [1, 9, 2, 9]
    assert count_subarrays_with_max(nums, nums.count(9) + 1) == 0


def test_count_subarrays_with_max_empty():
    with pytest.raises(ValueError):
        count_subarrays_with_max([], 1)


@pytest.mark.parametrize("n,k", [(4, 3), (6, 4), (6, 6)])
def test_alternating_groups_fully_alternating(n, k):
    colors = [i % 2 for i in range(n)]
    assert number_of_alternating_groups(colors, k) == n


def test_alternating_groups_single_colour():
    assert number_of_alternating_groups([1, 1, 1, 1], 3) == 0


def test_alternating_groups_example_and_no_mutation():
    colors = [0, 1, 0, 1, 0]
    assert number_of_alternating_groups(colors, 3) == 3
    assert colors == [0, 1, 0, 1, 0]


def test_is_zero_array_covered():
    assert is_zero_array([1, 1, 1], [[0, 2]]) is True


def test_is_zero_array_no_queries():
    assert is_zero_array([0, 0], []) is True
    assert is_zero_array([0, 1], []) is False


def test_is_zero_array_not_enough_cover():
    assert is_zero_array([2, 1], [[0, 1]]) is False


def test_min_zero_array_already_zero():
    assert min_zero_array([0, 0, 0], [[0, 2, 1]]) == 0


def test_min_zero_array_impossible():
    assert min_zero_array([1], []) == -1
    assert min_zero_array([5, 5], [[0, 1, 1]]) == -1


def test_min_zero_array_example():
    assert min_zero_array([2, 0, 2], [[0, 2, 1], [0, 2, 1], [1, 1, 3]]) == 2


def test_max_removal_all_removable():
    queries = [[0, 1], [1, 2], [0, 2]]
    assert max_removal([0, 0, 0], queries) == len(queries)


def test_max_removal_keeps_one():
    queries = [[0, 1], [0, 1], [0, 1]]
    assert max_removal([1, 1], queries) == len(queries) - 1


def test_max_removal_impossible():
    assert max_removal([2, 2], [[0, 1]]) == -1