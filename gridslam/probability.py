"""Probability densities and percentiles."""

from __future__ import annotations

import math


def probability_density_gaussian(sample, mean, stddev):
    """Normal density; with zero spread it is 1 at the mean and 0 elsewhere."""
    if stddev == 0:
        return 1.0 if sample == mean else 0.0
    variance = stddev * stddev
    return (
        1.0
        / math.sqrt(2.0 * variance * math.pi)
        * math.exp(-((sample - mean) ** 2) / (2.0 * variance))
    )


def probability_density_exp(sample, lam):
    """Exponential density with rate ``lam``; zero for non-positive samples."""
    if sample > 0:
        return lam * math.exp(-lam * sample)
    return 0.0


def probability_density_uniform(sample, min_value, max_value):
    """Uniform density on the closed range [min_value, max_value]."""
    if min_value <= sample <= max_value:
        return 1.0 / (max_value - min_value)
    return 0.0


def get_percentile(values, percentile):
    """Return the element at fraction ``percentile`` of the sorted values."""
    ordered = sorted(values)
    index = int(len(ordered) * percentile)
    if not 0 <= index < len(ordered):
        raise IndexError(f"percentile {percentile} out of range for {len(ordered)} values")
    return ordered[index]