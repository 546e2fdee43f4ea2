"""Deterministic primality by trial division."""

from __future__ import annotations

from large_primes.core.integers import is_even, isqrt
from large_primes.primality.verdict import Verdict


def standard(n: int) -> Verdict:
    """Check primality by trying every odd divisor up to sqrt(n).

    Exact, but the running time grows with sqrt(n), so it is only practical
    for moderate n. Use it as ground truth for the probabilistic tests.

    Args:
        n: Number to check.

    Returns:
        Verdict.PRIME or Verdict.COMPOSITE.
    """
    if n < 2:
        return Verdict.COMPOSITE
    if n in (2, 3):
        return Verdict.PRIME
    if is_even(n):
        return Verdict.COMPOSITE

    limit = isqrt(n)
    divisor = 3
    while divisor <= limit:
        if n % divisor == 0:
            return Verdict.COMPOSITE
        divisor += 2

    return Verdict.PRIME
