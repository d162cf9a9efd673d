"""Seedable random number source."""

from __future__ import annotations

import random


class Random:
    """Random numbers from a private, optionally seeded generator."""

    def __init__(self, seed=None):
        self._generator = random.Random(seed)

    def uniform_random(self, a=0.0, b=1.0):
        """A uniformly distributed number between ``a`` and ``b``."""
        return (b - a) * self._generator.random() + a

    def random_int(self, min_value, max_value):
        """A uniformly distributed integer in [min_value, max_value], both inclusive."""
        return self._generator.randint(min_value, max_value)

    def gaussian(self, mean, stddev):
        """A sample from a normal distribution."""
        return mean + stddev * self._generator.gauss(0.0, 1.0)