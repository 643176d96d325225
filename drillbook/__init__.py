"""Algorithms for counting, expectation and greedy assignment problems on arrays and strings."""

__version__ = "0.1.0"