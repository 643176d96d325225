"""Cheapest way to make a binary string alternate except for exactly one adjacent pair."""

from __future__ import annotations

from collections.abc import Sequence


def _alternating_table(bits: Sequence[int], costs: Sequence[int]) -> list[tuple[int, int]]:
    """For each prefix length k, the cost of making bits[:k] alternate ending in 0 and in 1."""
    table: list[tuple[int, int]] = [(0, 0)]
    for bit, cost in zip(bits, costs):
        previous = table[-1]
        row = [0, 0]
        row[bit] = previous[bit ^ 1]
        row[bit ^ 1] = previous[bit] + cost
        table.append((row[0], row[1]))
    return table


def min_cost_single_pair(s: str, costs: Sequence[int]) -> int:
    """Return the minimum total cost so that `s` has exactly one pair of equal neighbours.

    Flipping ``s[i]`` costs ``costs[i]``.
    """
    if len(s) != len(costs):
        raise ValueError("string and costs must have the same length")
    if len(s) < 2:
        raise ValueError("string must have at least two characters")
    if set(s) - {"0", "1"}:
        raise ValueError("string must consist of '0' and '1' only")

    bits = [int(ch) for ch in s]
    costs = list(costs)
    n = len(bits)

    prefix = _alternating_table(bits, costs)
    reversed_table = _alternating_table(bits[::-1], costs[::-1])

    def suffix(start: int) -> tuple[int, int]:
        return reversed_table[n - start]

    best = None
    for pos, (left_pair, right_pair) in enumerate(zip(zip(bits, costs), zip(bits[1:], costs[1:]))):
        (left_bit, left_cost), (right_bit, right_cost) = left_pair, right_pair
        for target in (0, 1):
            total = (
                (left_bit != target) * left_cost
                + (right_bit != target) * right_cost
                + prefix[pos][target ^ 1]
                + suffix(pos + 2)[target ^ 1]
            )
            if best is None or total < best:
                best = total
    assert best is not None
    return best