"""Tests for amount scaling helpers."""

from decimal import Decimal

import pytest

from sen_sdk import ScalingError, decimalize, div, undecimalize


class TestDecimalize:
    def test_string_input(self):
        assert decimalize("1.5", 9) == 1_500_000_000

    def test_int_and_decimal_input(self):
        assert decimalize(2, 6) == 2_000_000
        assert decimalize(Decimal("0.000001"), 6) == 1

    def test_truncates_extra_digits(self):
        assert decimalize("0.0000019", 6) == 1

    def test_invalid_input(self):
        with pytest.raises(ScalingError):
            decimalize("abc", 9)
        with pytest.raises(ScalingError):
            decimalize("NaN", 9)

    def test_zero_decimals(self):
        assert decimalize("5", 0) == 5
        assert decimalize("5.9", 0) == 5

    def test_invalid_decimals(self):
        with pytest.raises(ScalingError):
            decimalize("1", -1)


class TestUndecimalize:
    def test_strips_trailing_zeros(self):
        assert undecimalize(1_500_000_000, 9) == "1.5"

    def test_whole_number(self):
        assert undecimalize(3_000_000, 6) == "3"

    def test_small_fraction(self):
        assert undecimalize(1, 9) == "0.000000001"

    def test_zero_decimals(self):
        assert undecimalize(5, 0) == "5"

    def test_invalid_decimals(self):
        with pytest.raises(ScalingError):
            undecimalize(5, -1)

    def test_negative(self):
        assert undecimalize(-2_500_000, 6) == "-2.5"

    def test_inverts_decimalize(self):
        for text in ("0.1", "123.456", "7", "0.000000009"):
            assert undecimalize(decimalize(text, 9), 9) == text


class TestDiv:
    def test_nine_decimal_places(self):
        assert div(1, 3) == 0.333333333

    def test_zero_numerator(self):
        assert div(0, 5) == 0.0

    def test_zero_divisor(self):
        with pytest.raises(ScalingError):
            div(5, 0)
