"""Primality verdicts."""

from __future__ import annotations

from enum import Enum


class Verdict(str, Enum):
    """Outcome of a primality test.

    Trial division and Lucas-Lehmer give certain answers (PRIME or
    COMPOSITE). Fermat and Miller-Rabin only ever prove compositeness, so a
    candidate that survives every round is PROBABLY_PRIME.
    """
    PRIME = "prime"
    COMPOSITE = "composite"
    PROBABLY_PRIME = "probably prime"
    INCONCLUSIVE = "inconclusive"

    @property
    def possibly_prime(self) -> bool:
        return self in (Verdict.PRIME, Verdict.PROBABLY_PRIME)

    def __str__(self) -> str:
        return self.value
