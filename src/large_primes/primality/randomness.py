"""Random base selection for the probabilistic testers."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw an integer uniformly from [a, b]."""

    def randint(self, a: int, b: int) -> int:
        ...


def default_rng(seed: Optional[int] = None) -> random.Random:
    """Create a fresh random source, seeded from the OS when seed is None."""
    return random.Random(seed)
