"""Element-wise helpers for sequences of numbers."""

from __future__ import annotations


def sum_vector(values, zero=0):
    """Sum of ``values`` starting from ``zero``."""
    total = zero
    for value in values:
        total += value
    return total


def add_to_each_element(values, value):
    """A new list with ``value`` added to every element."""
    return [item + value for item in values]


def multiply_each_element(values, value):
    """A new list with every element multiplied by ``value``."""
    return [item * value for item in values]


def add_vector_elements(a1, a2):
    """Element-wise sum over the length of ``a1``; ``a2`` must be at least as long."""
    if len(a2) < len(a1):
        raise ValueError("second sequence is shorter than the first")
    return [x + y for x, y in zip(a1, a2)]


def min_element(values, zero=0):
    """Smallest of ``zero`` and all ``values``."""
    result = zero
    for value in values:
        result = min(result, value)
    return result