import random

import pytest

from drillbook.shifting_multiset import ShiftingMultiset, run_queries


def test_worked_example():
    assert run_queries([(1, 3), (1, 5), (3,), (2, 2), (3,)]) == [3, 7]


def test_repeated_large_shifts():
    queries = [(1, 10**9)] + [(2, 10**9)] * 4 + [(3,)]
    assert run_queries(queries) == [5_000_000_000]


def test_pops_come_out_sorted():
    rng = random.Random(1)
    values = [rng.randint(1, 100) for _ in range(50)]
    multiset = ShiftingMultiset()
    for value in values:
        multiset.add(value)
    popped = [multiset.pop_min() for _ in values]
    assert popped == sorted(values)
    assert len(multiset) == 0


def test_shift_applies_only_to_existing_elements():
    multiset = ShiftingMultiset()
    multiset.add(10)
    multiset.shift(5)
    multiset.add(12)
    assert multiset.pop_min() == 12
    assert multiset.pop_min() == 15


def test_pop_from_empty():
    with pytest.raises(IndexError):
        ShiftingMultiset().pop_min()


def test_invalid_query():
    with pytest.raises(ValueError):
        run_queries([(4, 1)])
    with pytest.raises(ValueError):
        run_queries([(1,)])