"""large_primes - primality testing and prime generation for big integers."""

__version__ = "0.5.1"

from large_primes.core import generate_primes, parse_integer, pow_mod, power
from large_primes.primality import (
    Verdict,
    fermat,
    lucas_lehmer,
    miller_rabin,
    standard,
)
from large_primes.dispatcher import Action, ActionResult, dispatch

__all__ = [
    "generate_primes",
    "parse_integer",
    "power",
    "pow_mod",
    "Verdict",
    "standard",
    "fermat",
    "miller_rabin",
    "lucas_lehmer",
    "Action",
    "ActionResult",
    "dispatch",
]
