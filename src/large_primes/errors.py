"""Error types raised by large_primes.

ParseError and DomainError subclass ValueError so callers that only know
about built-in exceptions still catch bad input. InternalError marks a
broken arithmetic invariant and is never expected in normal use.
"""


class LargePrimesError(Exception):
    """Base class for all large_primes errors."""


class ParseError(LargePrimesError, ValueError):
    """Input text is not a valid non-negative decimal integer."""


class DomainError(LargePrimesError, ValueError):
    """A value lies outside the domain of the requested operation."""


class InternalError(LargePrimesError, RuntimeError):
    """An arithmetic invariant was violated (e.g. a zero modulus)."""
