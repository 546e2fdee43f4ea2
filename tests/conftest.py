"""Shared fixtures for large_primes tests."""

import math
import random
import sys

import pytest


class SequenceRandom:
    """Random source that replays a fixed list of bases."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        value = self.values[len(self.calls) % len(self.values)]
        assert a <= value <= b, f"base {value} outside [{a}, {b}]"
        self.calls.append((a, b))
        return value


@pytest.fixture
def sequence_rng():
    """Factory for deterministic base sequences."""
    return SequenceRandom


@pytest.fixture
def seeded_rng():
    return random.Random(20240601)


# Primes and composites shared by several test modules
LARGE_PRIMES = [
    871603259,
    98762051,
    1000000007,
    123575321,
    193818613,
    444444443,
    999999937,
    1000000000039,
    9999999929,
]

CARMICHAEL_NUMBERS = [561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265]


@pytest.fixture
def large_primes():
    return list(LARGE_PRIMES)


@pytest.fixture
def carmichael_numbers():
    return list(CARMICHAEL_NUMBERS)


@pytest.fixture
def reimposed_digit_limit():
    """Restore Python's default 4300-digit int/str limit for one test."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str digit limit")
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(0)


def naive_is_prime(n):
    """Independent primality check used to cross-check the package."""
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


@pytest.fixture
def prime_oracle():
    return naive_is_prime
