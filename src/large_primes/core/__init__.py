"""Core integer arithmetic and prime generation."""

from large_primes.core.integers import (
    gcd,
    is_even,
    isqrt,
    lift_digit_limit,
    parse_integer,
    trailing_zeros,
)
from large_primes.core.power import power, pow_mod
from large_primes.core.sieve import generate_primes

__all__ = [
    "gcd",
    "is_even",
    "isqrt",
    "lift_digit_limit",
    "parse_integer",
    "trailing_zeros",
    "power",
    "pow_mod",
    "generate_primes",
]
