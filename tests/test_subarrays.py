import random

import pytest

from drillbook.subarrays import (
    count_complete_subarrays,
    count_fixed_bound_subarrays,
    count_subarrays_score_below,
)


def _all_subarrays(n):
    return n * (n + 1) // 2


def test_complete_example():
    assert count_complete_subarrays([1, 3, 1, 2, 2]) == 4


def test_complete_all_equal():
    nums = [5, 5, 5, 5]
    assert count_complete_subarrays(nums) == _all_subarrays(len(nums))


def test_complete_all_distinct_only_whole_array():
    assert count_complete_subarrays([4, 1, 3, 2]) == count_complete_subarrays([7])


def test_complete_empty():
    assert count_complete_subarrays([]) == 0


def test_fixed_bound_example():
    assert count_fixed_bound_subarrays([1, 3, 5, 2, 7, 5], 1, 5) == 2


def test_fixed_bound_all_equal():
    nums = [1, 1, 1, 1]
    assert count_fixed_bound_subarrays(nums, 1, 1) == _all_subarrays(len(nums))


def test_fixed_bound_impossible_bounds():
    assert count_fixed_bound_subarrays([3, 4, 5], 5, 3) == 0


def test_fixed_bound_bad_value_splits():
    left = [1, 2, 3, 1]
    right = [3, 2, 1]
    joined = left + [9] + right
    assert count_fixed_bound_subarrays(joined, 1, 3) == (
        count_fixed_bound_subarrays(left, 1, 3) + count_fixed_bound_subarrays(right, 1, 3)
    )


def test_score_example():
    assert count_subarrays_score_below([2, 1, 4, 3, 5], 10) == 6


def test_score_large_k_counts_everything():
    nums = [3, 1, 4, 1, 5, 9]
    assert count_subarrays_score_below(nums, 10**12) == _all_subarrays(len(nums))


def test_score_k_one_counts_nothing():
    assert count_subarrays_score_below([1, 2, 3], 1) == 0


def test_score_monotonic_in_k():
    rng = random.Random(4)
    nums = [rng.randint(1, 10) for _ in range(20)]
    counts = [count_subarrays_score_below(nums, k) for k in range(1, 400, 7)]
    assert counts == sorted(counts)


def test_score_rejects_non_positive_k():
    with pytest.raises(ValueError):
        count_subarrays_score_below([1, 2], 0)