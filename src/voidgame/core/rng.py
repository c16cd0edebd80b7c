"""Seedable RNG wrapper used for every combat roll."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random so battles can be replayed from a seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll(self, low: int, high: int) -> int:
        """Return a random integer in the half-open range [low, high)."""
        if high <= low:
            raise ValueError(f"Empty roll range [{low}, {high}).")
        return self.randint(low, high - 1)
