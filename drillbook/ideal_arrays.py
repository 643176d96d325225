"""Counting ideal arrays: arrays where each element divides the next."""

from __future__ import annotations

from math import comb

MOD = 1_000_000_007


def prime_exponents(x: int) -> list[int]:
    """Return the exponents of the prime factorisation of `x`, by increasing prime."""
    if x < 1:
        raise ValueError("x must be a positive integer")
    exponents: list[int] = []
    remaining = x
    factor = 2
    while factor * factor <= remaining:
        exponent = 0
        while remaining % factor == 0:
            remaining //= factor
            exponent += 1
        if exponent:
            exponents.append(exponent)
        factor += 1
    if remaining > 1:
        exponents.append(1)
    return exponents


def ideal_arrays(n: int, max_value: int) -> int:
    """Count arrays of length `n` with values in [1, max_value], each dividing the next, mod 1e9+7."""
    if n < 1:
        raise ValueError("n must be positive")
    if max_value < 1:
        raise ValueError("max_value must be positive")
    ways_for_exponent: dict[int, int] = {}
    total = 0
    for x in range(1, max_value + 1):
        ways = 1
        for e in prime_exponents(x):
            if e not in ways_for_exponent:
                ways_for_exponent[e] = comb(n + e - 1, e) % MOD
            ways = ways * ways_for_exponent[e] % MOD
        total += ways
    return total % MOD