"""Tests for grouped and human-scaled formatting."""

import pytest

from exactnum import N, Number, NumberConfig
from exactnum.formatting import group_digits, human_unit, human_unit_index, pad_fraction


class TestGroupDigits:
    """Tests for group_digits."""

    @pytest.mark.parametrize(
        "digits,expected",
        [
            ("0", "0"),
            ("12", "12"),
            ("123", "123"),
            ("1234", "1,234"),
            ("1234567", "1,234,567"),
            ("123456789012", "123,456,789,012"),
        ],
    )
    def test_default_grouping(self, digits, expected):
        """Groups of three from the right, comma separated."""
        assert group_digits(digits) == expected

    def test_custom_separator_and_size(self):
        """Separator and group size are configurable."""
        assert group_digits("12345678", separator=" ", size=4) == "1234 5678"
        assert group_digits("1234567", separator=".") == "1.234.567"


class TestPadFraction:
    """Tests for pad_fraction."""

    def test_pads_with_zeros(self):
        """Short fractions are right-padded."""
        assert pad_fraction("5", 3) == "500"
        assert pad_fraction("", 2) == "00"

    def test_cuts_long_fraction(self):
        """Long fractions are cut to the requested width."""
        assert pad_fraction("12345", 2) == "12"


class TestHumanUnitIndex:
    """Tests for the unit table lookup."""

    @pytest.mark.parametrize(
        "digits,expected",
        [(1, 0), (3, 0), (4, 3), (6, 3), (7, 6), (10, 9), (13, 12), (16, 15), (19, 18), (30, 18)],
    )
    def test_index(self, digits, expected):
        """Largest threshold strictly below the digit count."""
        assert human_unit_index(digits) == expected

    @pytest.mark.parametrize(
        "index,unit",
        [(0, ""), (3, "K"), (6, "M"), (9, "G"), (12, "T"), (15, "P"), (18, "E")],
    )
    def test_unit(self, index, unit):
        """Unit symbols for each threshold."""
        assert human_unit(index) == unit


class TestNumberFormat:
    """Tests for Number.format."""

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            ("1234567", 0, "1,234,567"),
            ("1234567.891", 2, "1,234,567.89"),
            ("-1234.5", 3, "-1,234.500"),
            ("999.5", 0, "1,000"),
            ("0.999", 2, "1.00"),
            ("0", 2, "0.00"),
            ("12.5", 0, "13"),
            ("-0.0001", 2, "0.00"),
            ("-0.4", 0, "0"),
        ],
    )
    def test_format(self, value, decimals, expected):
        """Rounds half away from zero, then groups and pads."""
        assert Number(value).format(decimals) == expected

    def test_format_respects_small_scale(self, scale_4):
        """Padding goes past the scale with zeros."""
        assert Number("1.23456", scale_4).format(6) == "1.234500"

    def test_negative_decimals_raises(self):
        """Negative decimals are rejected."""
        with pytest.raises(ValueError):
            N(1).format(-1)


class TestHumanFormat:
    """Tests for the human_* methods."""

    def test_millions(self):
        """1500000 is 1.5 M."""
        value = N("1500000")
        assert value.human_unit_index() == 6
        assert value.human_value() == "1.5"
        assert value.human_unit() == "M"
        assert value.human_format(1) == "1.5 M"

    def test_below_thousand_has_no_unit(self):
        """Values under 1000 are printed without a unit."""
        assert N("999").human_unit() == ""
        assert N("999").human_format() == "999"
        assert N("0.5").human_format(1) == "0.5"

    def test_thousands(self):
        """1234 is 1.23 K."""
        assert N("1234").human_format(2) == "1.23 K"
        assert N("1000").human_format() == "1 K"

    def test_negative(self):
        """Negative values scale by their magnitude."""
        assert N("-1500").human_format(1) == "-1.5 K"

    def test_beyond_exa_stays_at_exa(self):
        """Values above the table keep the largest unit."""
        assert N(10**21).human_format() == "1,000 E"

    def test_giga_tera(self):
        """Each unit covers three powers of ten."""
        assert N(2 * 10**9).human_format() == "2 G"
        assert N(25 * 10**12).human_format() == "25 T"
        assert N(3 * 10**15).human_format() == "3 P"

    def test_human_value_keeps_config(self):
        """human_value returns a Number with the same config."""
        config = NumberConfig(scale=2)
        value = Number("123456", config)
        assert value.human_value().config is config
        assert value.human_value().to_string() == "123.45"
