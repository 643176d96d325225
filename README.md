# drillbook

A small library of exact algorithms for classic counting, expectation and
assignment problems over arrays and strings. Every function takes plain
Python values and returns plain Python values.

## Installation

```
pip install drillbook
```

For running the tests:

```
pip install "drillbook[test]"
pytest
```

## What is inside

| Module | Functions and classes | Problem |
| --- | --- | --- |
| `drillbook.alternating` | `min_cost_single_pair(s, costs)` | Least cost to flip bits of a 0/1 string so that it has exactly one pair of equal neighbours; flipping `s[i]` costs `costs[i]` |
| `drillbook.ideal_arrays` | `prime_exponents(x)`, `ideal_arrays(n, max_value)` | Number of length-`n` arrays with values in `[1, max_value]` where each element divides the next, modulo 10^9+7 |
| `drillbook.matching` | `FenwickTree`, `count_inversions(sequence)`, `min_adjacent_swaps(a, b)` | Fewest adjacent swaps that minimise the sum of `(a[i] - b[i])^2`, modulo 99999997 |
| `drillbook.expected_values` | `AffineSegmentTree`, `expected_values(values, operations)` | Expected final array after random single-position replacements, modulo 998244353 |
| `drillbook.subarrays` | `count_complete_subarrays(nums)`, `count_fixed_bound_subarrays(nums, min_k, max_k)`, `count_subarrays_score_below(nums, k)` | Sliding-window subarray counts |
| `drillbook.shifting_multiset` | `ShiftingMultiset`, `run_queries(queries)` | A multiset that supports adding a constant to every element |
| `drillbook.task_assign` | `max_task_assign(tasks, workers, pills, strength)` | Most tasks that workers can finish, with a limited number of strength pills |
| `drillbook.decode` | `decode_string(s)` | Expand strings such as `3[a2[c]]` |

## Examples

```python
from drillbook.alternating import min_cost_single_pair
from drillbook.ideal_arrays import ideal_arrays
from drillbook.subarrays import count_complete_subarrays
from drillbook.shifting_multiset import ShiftingMultiset
from drillbook.decode import decode_string

min_cost_single_pair("00011", [3, 9, 2, 6, 4])   # 7
ideal_arrays(2, 5)                               # 10
count_complete_subarrays([1, 3, 1, 2, 2])        # 4

bag = ShiftingMultiset()
bag.add(5)
bag.add(3)
bag.shift(2)
bag.pop_min()                                    # 5

decode_string("3[a2[c]]")                        # "accaccacc"
```

## Details

`run_queries` takes the three query kinds of `ShiftingMultiset` as tuples:
`(1, x)` adds `x`, `(2, x)` adds `x` to every element, and `(3,)` removes the
smallest element. It returns the values that the `(3,)` queries removed, in
order. Any other query raises `ValueError`; popping from an empty multiset
raises `IndexError`.

`expected_values` takes the starting array and a list of `(left, right, x)`
operations with 1-based inclusive bounds. Each operation replaces one position
chosen uniformly from `[left, right]` with `x`. The result holds each
position's expected value as a residue modulo 998244353. An operation whose
bounds fall outside the array raises `IndexError`.

`AffineSegmentTree.apply(left, right, mul, add)` works on 0-based half-open
ranges `[left, right)` and composes `x -> x*mul + add` onto each position;
`resolve(values)` returns the values with every applied map carried out.

`FenwickTree(size)` covers 1-based positions `1..size` with `add(index, delta)`
and `prefix_sum(index)`.

`min_adjacent_swaps` requires two sequences of equal length, each with
distinct elements, and raises `ValueError` otherwise.
`min_cost_single_pair` raises `ValueError` for strings shorter than two
characters, strings with characters other than `0` and `1`, or a cost list of
a different length. `decode_string` accepts lowercase letters, digits and
brackets, and raises `ValueError` on malformed input.

## What this package does not do

It is a library only: there is no command-line tool, and nothing reads
problem input from standard input or files. Call the functions from Python.