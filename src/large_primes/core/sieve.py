"""Prime number generation with the sieve of Eratosthenes.

The sieve works on a NumPy boolean array, so the bound is limited by the
memory needed for ``maximum + 1`` bytes rather than by integer width.
"""

from __future__ import annotations

import logging

import numpy as np

from large_primes.core.integers import isqrt

logger = logging.getLogger(__name__)


def _sieve_mask(limit: int) -> np.ndarray:
    """Boolean mask where mask[i] is True iff i is prime, for 0 <= i <= limit."""
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[0] = False
    is_prime[1] = False

    for i in range(2, isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return is_prime


def generate_primes(maximum: int) -> np.ndarray:
    """Generate all prime numbers up to and including maximum.

    Args:
        maximum: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes <= maximum. Empty when maximum < 2.
    """
    if maximum < 2:
        return np.array([], dtype=np.int64)

    logger.debug(f"Sieving primes up to {maximum}")
    primes = np.nonzero(_sieve_mask(maximum))[0].astype(np.int64)
    logger.debug(f"Found {len(primes)} primes up to {maximum}")

    return primes
