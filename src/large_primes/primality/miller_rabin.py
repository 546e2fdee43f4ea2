"""Miller-Rabin probable-prime test."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from large_primes.config import DEFAULT_ROUNDS
from large_primes.core.integers import is_even, trailing_zeros
from large_primes.core.power import pow_mod
from large_primes.errors import DomainError
from large_primes.primality.randomness import RandomSource, default_rng
from large_primes.primality.verdict import Verdict

logger = logging.getLogger(__name__)


def decompose(m: int) -> Tuple[int, int]:
    """Split m into (s, d) with m == 2**s * d and d odd."""
    s = trailing_zeros(m)
    return s, m >> s


def _is_witness(a: int, s: int, d: int, n: int) -> bool:
    """True if base a proves n composite."""
    x = pow_mod(a, d, n)
    if x == 1 or x == n - 1:
        return False

    for _ in range(s - 1):
        x = pow_mod(x, 2, n)
        if x == n - 1:
            return False

    return True


def miller_rabin(
    n: int,
    rounds: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Verdict:
    """Miller-Rabin primality test with random bases.

    Writes n - 1 as 2**s * d and checks that each random base a either has
    a**d == 1 or reaches -1 within s squarings. Every composite n fails for
    at least 3/4 of the bases, so ``rounds`` independent bases bound the
    false-positive probability by 4**-rounds. Unlike the Fermat test it is
    not fooled by Carmichael numbers.

    Args:
        n: Number to test.
        rounds: Number of random bases to try. Defaults to DEFAULT_ROUNDS.
        rng: Source of random bases. A fresh ``random.Random`` if None.

    Returns:
        Verdict.PRIME for 2 and 3, Verdict.COMPOSITE if a witness was found,
        otherwise Verdict.PROBABLY_PRIME.

    Raises:
        DomainError: If rounds is less than 1.
    """
    if rounds is None:
        rounds = DEFAULT_ROUNDS
    if rounds < 1:
        raise DomainError(f"rounds must be >= 1, got {rounds}")

    if n < 2:
        return Verdict.COMPOSITE
    if n in (2, 3):
        return Verdict.PRIME
    if is_even(n):
        return Verdict.COMPOSITE

    if rng is None:
        rng = default_rng()

    s, d = decompose(n - 1)

    for i in range(rounds):
        a = rng.randint(2, n - 2)
        if _is_witness(a, s, d, n):
            logger.debug(f"Miller-Rabin: {n} is composite, witness {a} (round {i + 1})")
            return Verdict.COMPOSITE

    logger.debug(f"Miller-Rabin: {n} passed {rounds} rounds")
    return Verdict.PROBABLY_PRIME
