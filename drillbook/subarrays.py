"""Sliding-window subarray counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def count_complete_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays that contain every distinct value of `nums`."""
    needed = len(set(nums))
    counts: Counter[int] = Counter()
    covered = 0
    left = 0
    total = 0
    n = len(nums)
    for right, value in enumerate(nums):
        counts[value] += 1
        if counts[value] == 1:
            covered += 1
        while covered == needed:
            total += n - right
            counts[nums[left]] -= 1
            if counts[nums[left]] == 0:
                covered -= 1
            left += 1
    return total


def count_fixed_bound_subarrays(nums: Sequence[int], min_k: int, max_k: int) -> int:
    """Count subarrays whose minimum is `min_k` and whose maximum is `max_k`."""
    last_bad = last_min = last_max = -1
    total = 0
    for index, value in enumerate(nums):
        if value < min_k or value > max_k:
            last_bad = index
        if value == min_k:
            last_min = index
        if value == max_k:
            last_max = index
        total += max(0, min(last_min, last_max) - last_bad)
    return total


def count_subarrays_score_below(nums: Sequence[int], k: int) -> int:
    """Count subarrays whose sum times length is strictly less than `k` (positive values)."""
    if k <= 0:
        raise ValueError("k must be positive")
    left = 0
    window_sum = 0
    total = 0
    for right, value in enumerate(nums):
        window_sum += value
        while window_sum * (right - left + 1) >= k:
            window_sum -= nums[left]
            left += 1
        total += right - left + 1
    return total