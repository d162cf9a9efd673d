"""Helpers for fixed-length sequences, optionally masked element by element."""

from __future__ import annotations

import math


def _check_lengths(*sequences):
    lengths = {len(s) for s in sequences}
    if len(lengths) > 1:
        raise ValueError("sequences must have the same length")


def make_array(n, value):
    """A list of ``n`` copies of ``value``."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return [value] * n


def sum_array(values):
    """Sum of all elements."""
    total = 0
    for value in values:
        total += value
    return total


def selective_sum(values, mask, zero=0):
    """Sum of the elements whose mask entry is true, starting from ``zero``."""
    _check_lengths(values, mask)
    total = zero
    for value, keep in zip(values, mask):
        if keep:
            total += value
    return total


def selective_equal(mask, v1, v2):
    """Whether ``v1`` and ``v2`` agree wherever the mask is true."""
    _check_lengths(mask, v1, v2)
    return all(a == b for keep, a, b in zip(mask, v1, v2) if keep)


def min_element(values):
    """Smallest element; infinity for an empty sequence."""
    return min(values, default=math.inf)


def selective_min_element(values, mask):
    """Smallest masked-in element; infinity if none is selected."""
    _check_lengths(values, mask)
    return min((v for v, keep in zip(values, mask) if keep), default=math.inf)


def max_element(values):
    """Largest element; negative infinity for an empty sequence."""
    return max(values, default=-math.inf)


def selective_max_element(values, mask):
    """Largest masked-in element; negative infinity if none is selected."""
    _check_lengths(values, mask)
    return max((v for v, keep in zip(values, mask) if keep), default=-math.inf)


def add_to_each_element(values, value):
    """A new list with ``value`` added to every element."""
    return [item + value for item in values]


def add_array_elements(a1, a2):
    """Element-wise sum of two equally long sequences."""
    _check_lengths(a1, a2)
    return [x + y for x, y in zip(a1, a2)]


def subtract_array_elements(a1, a2):
    """Element-wise difference of two equally long sequences."""
    _check_lengths(a1, a2)
    return [x - y for x, y in zip(a1, a2)]


def get_indexed_elements(arrays, needs_replans, indices, zero):
    """Pick ``arrays[i][indices[i]]`` where ``needs_replans[i]``, else ``zero``.

    Raises IndexError when a selected index is outside its sequence.
    """
    _check_lengths(arrays, needs_replans, indices)
    result = []
    for seq, selected, index in zip(arrays, needs_replans, indices):
        if not selected:
            result.append(zero)
            continue
        if not 0 <= index < len(seq):
            raise IndexError(f"Index {index} out of range {len(seq)}")
        result.append(seq[index])
    return result


def max_datastructure_size(containers):
    """Largest length among the containers; 0 if there are none."""
    return max((len(c) for c in containers), default=0)