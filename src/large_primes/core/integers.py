"""Arbitrary-precision integer helpers.

Python's ``int`` is the big-integer type throughout the package. This module
keeps the handful of operations the testers need in one place so none of
them reaches for a fixed-width representation.
"""

from __future__ import annotations

import math
import sys

from large_primes.errors import DomainError, InternalError, ParseError


def lift_digit_limit() -> None:
    """Allow int <-> decimal text conversion of any length.

    Python 3.11+ (and patched 3.9/3.10) refuse to convert integers above
    4300 digits. Results here are routinely larger than that.
    """
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


lift_digit_limit()


def parse_integer(text: str | int, name: str = "value") -> int:
    """Parse decimal text into a non-negative integer.

    Args:
        text: Decimal digits, optionally surrounded by whitespace and
            prefixed with ``+``. Ints are accepted as-is.
        name: Field name used in error messages.

    Returns:
        The parsed integer.

    Raises:
        ParseError: If the text is empty, contains non-digit characters,
            or denotes a negative number.
    """
    if isinstance(text, bool):
        raise ParseError(f"{name} must be an integer, got {text!r}")

    if isinstance(text, int):
        if text < 0:
            raise ParseError(f"{name} must be non-negative, got {text}")
        return text

    if not isinstance(text, str):
        raise ParseError(f"{name} must be decimal text, got {type(text).__name__}")

    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]

    # str.isdigit() accepts superscripts and other non-ASCII digits
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ParseError(f"{name} is not a valid non-negative integer: {text!r}")

    try:
        return int(digits)
    except ValueError as e:
        raise ParseError(f"{name} could not be converted: {e}") from e


def is_even(n: int) -> bool:
    return n & 1 == 0


def trailing_zeros(n: int) -> int:
    """Count the zero bits below the lowest set bit of n."""
    if n == 0:
        raise InternalError("trailing_zeros is undefined for 0")
    return (n & -n).bit_length() - 1


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; gcd(0, 0) == 0."""
    return math.gcd(a, b)


def isqrt(n: int) -> int:
    """Floor of the square root of n."""
    if n < 0:
        raise DomainError(f"isqrt requires n >= 0, got {n}")
    return math.isqrt(n)
