"""Lucas-Lehmer test for Mersenne numbers."""

from __future__ import annotations

import logging

from large_primes.core.power import power
from large_primes.errors import DomainError
from large_primes.primality.verdict import Verdict

logger = logging.getLogger(__name__)


def mersenne_number(p: int) -> int:
    """Return the Mersenne number 2**p - 1 for p >= 2."""
    if p < 2:
        raise DomainError(f"mersenne exponent must be >= 2, got {p}")
    return power(2, p) - 1


def lucas_lehmer(p: int) -> Verdict:
    """Decide whether the Mersenne number 2**p - 1 is prime.

    Runs the recurrence s = s**2 - 2 (mod M) from s = 4 for p - 2 steps;
    M is prime exactly when the final s is 0. The test is exact, but it only
    applies to numbers of Mersenne form, so it takes the exponent rather
    than the number itself.

    Args:
        p: Exponent of the Mersenne number, at least 2.

    Returns:
        Verdict.PRIME or Verdict.COMPOSITE.

    Raises:
        DomainError: If p is less than 2.
    """
    m = mersenne_number(p)
    if p == 2:
        return Verdict.PRIME

    s = 4
    for _ in range(p - 2):
        s = (s * s - 2) % m

    verdict = Verdict.PRIME if s == 0 else Verdict.COMPOSITE
    logger.debug(f"Lucas-Lehmer: M{p} is {verdict} after {p - 2} iterations")
    return verdict
