"""Expected array values after random single-element replacements, modulo 998244353."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 998_244_353


class AffineSegmentTree:
    """Lazy segment tree of affine maps x -> x*mul + add over positions 0..size-1."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._mul = [1] * (4 * size)
        self._add = [0] * (4 * size)

    def _compose(self, node: int, mul: int, add: int) -> None:
        self._mul[node] = self._mul[node] * mul % MOD
        self._add[node] = (self._add[node] * mul + add) % MOD

    def _push(self, node: int) -> None:
        mul, add = self._mul[node], self._add[node]
        if mul != 1 or add != 0:
            self._compose(2 * node, mul, add)
            self._compose(2 * node + 1, mul, add)
            self._mul[node], self._add[node] = 1, 0

    def apply(self, left: int, right: int, mul: int, add: int) -> None:
        """Apply x -> x*mul + add to every position in the half-open range [left, right)."""
        if not 0 <= left <= right <= self.size:
            raise IndexError("range out of bounds")
        if left < right:
            self._apply(1, 0, self.size, left, right, mul % MOD, add % MOD)

    def _apply(self, node: int, lo: int, hi: int, left: int, right: int, mul: int, add: int) -> None:
        if left <= lo and hi <= right:
            self._compose(node, mul, add)
            return
        self._push(node)
        mid = (lo + hi) // 2
        if left < mid:
            self._apply(2 * node, lo, mid, left, right, mul, add)
        if right > mid:
            self._apply(2 * node + 1, mid, hi, left, right, mul, add)

    def resolve(self, values: Sequence[int]) -> list[int]:
        """Return every value transformed by all maps applied at its position, mod 998244353."""
        if len(values) != self.size:
            raise ValueError("values must match the tree size")
        result = [0] * self.size
        self._resolve(1, 0, self.size, values, result)
        return result

    def _resolve(self, node: int, lo: int, hi: int, values: Sequence[int], out: list[int]) -> None:
        if hi - lo == 1:
            out[lo] = (values[lo] * self._mul[node] + self._add[node]) % MOD
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._resolve(2 * node, lo, mid, values, out)
        self._resolve(2 * node + 1, mid, hi, values, out)


def expected_values(values: Sequence[int], operations: Iterable[tuple[int, int, int]]) -> list[int]:
    """Expected final values after each (L, R, x) replaces a uniformly chosen a[i], L <= i <= R.

    Positions L and R are 1-based and inclusive. Results are given modulo 998244353.
    """
    size = len(values)
    tree = AffineSegmentTree(size)
    for left, right, x in operations:
        if not 1 <= left <= right <= size:
            raise IndexError("operation range out of bounds")
        length = right - left + 1
        inverse = pow(length, MOD - 2, MOD)
        tree.apply(left - 1, right, (length - 1) * inverse % MOD, inverse * x % MOD)
    return tree.resolve(values)