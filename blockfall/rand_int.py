"""Uniform random integers over a closed range."""

from __future__ import annotations

import random


class RandInt:
    """Callable that draws integers uniformly from ``[low, high]``.

    With no seed the generator is seeded from the operating system's
    entropy source, falling back to the current time.
    """

    def __init__(self, low: int, high: int, seed: int | None = None) -> None:
        if low > high:
            raise ValueError(f"empty range: low {low} is greater than high {high}")
        self.low = low
        self.high = high
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randint(self.low, self.high)

    def __repr__(self) -> str:
        return f"RandInt(low={self.low}, high={self.high})"