"""Tests for one-decimal formatting."""

import pytest

from bmichecker.calculation.formatting import format_one_decimal


class TestFormatOneDecimal:
    """Tests for format_one_decimal()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (23.148148148148145, "23.1"),
            (177.8, "177.8"),
            (81.63265306122449, "81.6"),
            (40.0, "40"),
            (180.0, "180"),
            (0.04, "0"),
            (1000.0, "1000"),
            (25.83, "25.8"),
            (18.46, "18.5"),
        ],
    )
    def test_format(self, value, expected):
        """Test rounding and suppression of a zero fraction."""
        assert format_one_decimal(value) == expected

    def test_no_grouping(self):
        """Large values have no thousands separator."""
        assert format_one_decimal(12345.67) == "12345.7"

    def test_near_integer_rounds_to_integer(self):
        """A value that rounds to a whole number drops the fraction."""
        assert format_one_decimal(39.99999999) == "40"
