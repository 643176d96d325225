"""A multiset that supports adding a constant to every element in constant time."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


class ShiftingMultiset:
    """Multiset with insert, global shift and pop-minimum."""

    def __init__(self) -> None:
        self._items: SortedList = SortedList()
        self._offset = 0

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: int) -> None:
        """Insert `value`."""
        self._items.add(value - self._offset)

    def shift(self, amount: int) -> None:
        """Add `amount` to every element currently held."""
        self._offset += amount

    def pop_min(self) -> int:
        """Remove and return the smallest element."""
        if not self._items:
            raise IndexError("pop from an empty multiset")
        return self._items.pop(0) + self._offset


def run_queries(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run queries (1, x) add, (2, x) shift, (3,) pop-min; return the popped values."""
    multiset = ShiftingMultiset()
    output: list[int] = []
    for query in queries:
        match tuple(query):
            case (1, value):
                multiset.add(value)
            case (2, amount):
                multiset.shift(amount)
            case (3,):
                output.append(multiset.pop_min())
            case _:
                raise ValueError(f"invalid query: {query!r}")
    return output