"""Tests for es-UY number formatting."""

import math
from decimal import Decimal

import pytest

from esg_dashboard.engine.formatting import (
    format_currency,
    format_fixed,
    format_number,
    format_score,
    is_number,
    round_half_up,
)


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value,digits,expected",
        [
            (1234.56, 1, "1.234,6"),
            (1000, 1, "1.000"),
            (999, 0, "999"),
            (1234567, 0, "1.234.567"),
            (0.05, 1, "0,1"),
            (18.5, 1, "18,5"),
            (-1234.5, 0, "-1.235"),
            (0, 1, "0"),
        ],
    )
    def test_values(self, value, digits, expected):
        assert format_number(value, digits) == expected

    def test_not_available(self):
        assert format_number(None) == "N/D"
        assert format_number(math.nan) == "N/D"
        assert format_number(True) == "N/D"


class TestOtherFormats:
    def test_currency(self):
        assert format_currency(1234) == "US$ 1.234"
        assert format_currency(25000.4) == "US$ 25.000"
        assert format_currency(-500) == "-US$ 500"
        assert format_currency(None) == "N/D"

    def test_fixed_uses_dot(self):
        assert format_fixed(2, 1) == "2.0"
        assert format_fixed(5.25, 1) == "5.3"

    def test_score(self):
        assert format_score(60) == "60"
        assert format_score(None) == "N/D"

    def test_is_number(self):
        assert is_number(3)
        assert is_number(2.5)
        assert not is_number(False)
        assert not is_number("3")
        assert not is_number(math.inf)


class TestLargeValues:
    def test_round_half_up_keeps_every_digit(self):
        assert round_half_up(1e30, 1) == Decimal(10) ** 30
        assert round_half_up(2.5e28) == Decimal(25) * Decimal(10) ** 27

    def test_format_number_groups_huge_values(self):
        assert format_number(1e30, 0) == "1." + ".".join(["000"] * 10)
        assert format_currency(-1e29) == "-US$ 100." + ".".join(["000"] * 9)
