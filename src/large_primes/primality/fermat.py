"""Fermat probable-prime test.

If p is prime then a**(p-1) == 1 (mod p) for every a coprime to p. A base
that breaks the congruence proves n composite. Carmichael numbers satisfy
it for every coprime base, so this test can be fooled; prefer Miller-Rabin.
"""

from __future__ import annotations

import logging
from typing import Optional

from large_primes.config import DEFAULT_ROUNDS
from large_primes.core.integers import gcd, is_even
from large_primes.core.power import pow_mod
from large_primes.errors import DomainError
from large_primes.primality.randomness import RandomSource, default_rng
from large_primes.primality.verdict import Verdict

logger = logging.getLogger(__name__)


def fermat(
    n: int,
    rounds: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Verdict:
    """Fermat primality test with random bases.

    Args:
        n: Number to test.
        rounds: Number of random bases to try. Defaults to DEFAULT_ROUNDS.
        rng: Source of random bases. A fresh ``random.Random`` if None.

    Returns:
        Verdict.COMPOSITE if a witness was found, otherwise
        Verdict.PROBABLY_PRIME.

    Raises:
        DomainError: If rounds is less than 1.
    """
    if rounds is None:
        rounds = DEFAULT_ROUNDS
    if rounds < 1:
        raise DomainError(f"rounds must be >= 1, got {rounds}")

    if n < 2:
        return Verdict.COMPOSITE
    # No base exists in [2, n-2]
    if n in (2, 3):
        return Verdict.PROBABLY_PRIME
    if is_even(n):
        return Verdict.COMPOSITE

    if rng is None:
        rng = default_rng()

    for i in range(rounds):
        a = rng.randint(2, n - 2)

        if gcd(a, n) != 1:
            logger.debug(f"Fermat: base {a} shares a factor with {n}")
            return Verdict.COMPOSITE

        if pow_mod(a, n - 1, n) != 1:
            logger.debug(f"Fermat: {n} is composite, witness {a} (round {i + 1})")
            return Verdict.COMPOSITE

    logger.debug(f"Fermat: {n} passed {rounds} rounds")
    return Verdict.PROBABLY_PRIME
