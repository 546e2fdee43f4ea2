"""Tests for big-integer helpers."""

import pytest

from large_primes.core.integers import gcd, is_even, isqrt, parse_integer, trailing_zeros
from large_primes.errors import DomainError, InternalError, ParseError


class TestParseInteger:
    """Tests for parse_integer function."""

    def test_plain_digits(self):
        assert parse_integer("0") == 0
        assert parse_integer("97") == 97

    def test_beyond_machine_width(self):
        text = "170141183460469231731687303715884105727"
        assert parse_integer(text) == 2**127 - 1

    def test_whitespace_and_plus(self):
        assert parse_integer("  42\n") == 42
        assert parse_integer("+7") == 7

    def test_int_passthrough(self):
        assert parse_integer(12345) == 12345

    @pytest.mark.parametrize("text", ["", "   ", "-5", "12a", "1.5", "0x10", "1_000", "+", "²"])
    def test_invalid_text(self, text):
        with pytest.raises(ParseError):
            parse_integer(text)

    def test_negative_int(self):
        with pytest.raises(ParseError):
            parse_integer(-3)

    def test_error_names_field(self):
        with pytest.raises(ParseError, match="target"):
            parse_integer("abc", "target")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_integer("nope")


class TestBitHelpers:
    """Tests for parity and trailing zero helpers."""

    def test_is_even(self):
        assert is_even(0)
        assert is_even(2**200)
        assert not is_even(2**200 + 1)

    def test_trailing_zeros(self):
        assert trailing_zeros(1) == 0
        assert trailing_zeros(8) == 3
        assert trailing_zeros(12) == 2
        assert trailing_zeros(2**100 * 3) == 100

    def test_trailing_zeros_of_zero(self):
        with pytest.raises(InternalError):
            trailing_zeros(0)


class TestGcd:
    """Tests for gcd function."""

    def test_edge_cases(self):
        assert gcd(0, 0) == 0
        assert gcd(1, 0) == 1
        assert gcd(0, 1) == 1
        assert gcd(2, 2) == 2

    def test_small_values(self):
        assert gcd(2, 3) == 1
        assert gcd(2, 4) == 2
        assert gcd(3, 6) == 3
        assert gcd(4, 8) == 4
        assert gcd(5, 10) == 5

    def test_larger_values(self):
        assert gcd(123456, 123456) == 123456
        assert gcd(123456, 123457) == 1
        assert gcd(123456, 123462) == 6
        assert gcd(123456, 123464) == 8
        assert gcd(123456, 123465) == 3


class TestGcdSigns:
    """gcd with negative and zero arguments."""

    def test_signed_values(self):
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(0, -7) == 7


class TestIsqrt:
    """Tests for isqrt function."""

    def test_exact_squares(self):
        assert isqrt(0) == 0
        assert isqrt(1) == 1
        assert isqrt(144) == 12
        assert isqrt(10**40) == 10**20

    def test_floor(self):
        assert isqrt(15) == 3
        assert isqrt(10**40 - 1) == 10**20 - 1

    def test_negative(self):
        with pytest.raises(DomainError):
            isqrt(-1)


class TestLongDecimalText:
    """Integers beyond the interpreter's default 4300-digit text limit."""

    def test_parse_5000_digits(self):
        assert parse_integer("1" * 5000) == (10**5000 - 1) // 9

    def test_render_5000_digits(self):
        assert str(parse_integer("7" * 5000)) == "7" * 5000

    def test_reimposed_limit_raises_parse_error(self, reimposed_digit_limit):
        with pytest.raises(ParseError, match="target"):
            parse_integer("1" * 5000, "target")
