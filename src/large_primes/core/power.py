"""Exponentiation by repeated squaring.

Exact powers and modular powers share one loop so the primality testers and
the ``power`` action can never disagree numerically.
"""

from __future__ import annotations

from typing import Optional

from large_primes.errors import DomainError, InternalError


def _square_and_multiply(base: int, exponent: int, modulus: Optional[int] = None) -> int:
    """Right-to-left binary exponentiation.

    Args:
        base: Base value.
        exponent: Non-negative exponent.
        modulus: Reduce every intermediate product modulo this value, or
            None for an exact result.

    Returns:
        base**exponent, reduced modulo ``modulus`` when given.
    """
    if modulus is not None:
        if modulus == 1:
            return 0
        base %= modulus

    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
            if modulus is not None:
                result %= modulus
        exponent >>= 1
        if exponent:
            base *= base
            if modulus is not None:
                base %= modulus

    return result


def power(base: int, exponent: int) -> int:
    """Compute base**exponent exactly.

    ``power(b, 0)`` is 1 for every b, including 0.

    Args:
        base: Base value.
        exponent: Non-negative exponent.

    Returns:
        The exact power.

    Raises:
        DomainError: If exponent is negative.
    """
    if exponent < 0:
        raise DomainError(f"exponent must be >= 0, got {exponent}")

    return _square_and_multiply(base, exponent)


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute (base**exponent) % modulus without building base**exponent.

    Args:
        base: Base value.
        exponent: Non-negative exponent.
        modulus: Positive modulus.

    Returns:
        The reduced power in [0, modulus).

    Raises:
        DomainError: If exponent or modulus is negative.
        InternalError: If modulus is zero.
    """
    if modulus == 0:
        raise InternalError("modulus must not be zero")
    if modulus < 0:
        raise DomainError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise DomainError(f"exponent must be >= 0, got {exponent}")

    return _square_and_multiply(base, exponent, modulus)
