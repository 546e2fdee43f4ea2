"""Primality tests."""

from large_primes.primality.verdict import Verdict
from large_primes.primality.randomness import RandomSource, default_rng
from large_primes.primality.standard import standard
from large_primes.primality.fermat import fermat
from large_primes.primality.miller_rabin import decompose, miller_rabin
from large_primes.primality.lucas_lehmer import lucas_lehmer, mersenne_number

__all__ = [
    "Verdict",
    "RandomSource",
    "default_rng",
    "standard",
    "fermat",
    "decompose",
    "miller_rabin",
    "lucas_lehmer",
    "mersenne_number",
]
