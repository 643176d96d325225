"""Minimum adjacent swaps to pair two sequences by rank, via inversion counting."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

MOD = 99_999_997


class FenwickTree:
    """Binary indexed tree over positions 1..size supporting point add and prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add `delta` at 1-based position `index`."""
        if not 1 <= index <= self.size:
            raise IndexError("index out of range")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions 1..index."""
        if not 0 <= index <= self.size:
            raise IndexError("index out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def count_inversions(sequence: Iterable) -> int:
    """Count pairs i < j with sequence[i] > sequence[j]."""
    values = list(sequence)
    ranks = {value: rank for rank, value in enumerate(sorted(set(values)), start=1)}
    tree = FenwickTree(len(ranks))
    inversions = 0
    for seen, value in enumerate(values):
        rank = ranks[value]
        inversions += seen - tree.prefix_sum(rank)
        tree.add(rank, 1)
    return inversions


def _order_by_value(items: Sequence) -> list[int]:
    if len(set(items)) != len(items):
        raise ValueError("elements must be distinct")
    return sorted(range(len(items)), key=items.__getitem__)


def min_adjacent_swaps(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Minimum adjacent swaps so that the sum of (a[i]-b[i])^2 is minimal, mod 99999997.

    The optimum pairs the k-th smallest of `a` with the k-th smallest of `b`.
    """
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    order_a = _order_by_value(a)
    order_b = _order_by_value(b)
    partner = [0] * len(b)
    for index_a, index_b in zip(order_a, order_b):
        partner[index_b] = index_a
    return count_inversions(partner) % MOD