"""Tests for MutableNumber."""

import pytest

from exactnum import MutableNumber, N, Number
from exactnum.errors import DivisionByZero


class TestMutableNumber:
    """Tests for the in-place accumulator."""

    def test_running_total(self):
        """Ten additions of 0.1 give exactly 1."""
        total = MutableNumber()
        for _ in range(10):
            total += "0.1"
        assert total == 1

    def test_augmented_assignment_keeps_identity(self):
        """+= updates the same object."""
        total = MutableNumber(1)
        alias = total
        total += 2
        total *= 3
        assert alias is total
        assert alias == 9

    def test_all_augmented_operators(self):
        """-=, /=, %= and **= update in place."""
        value = MutableNumber(10)
        value -= 4
        assert value == 6
        value /= 4
        assert value == "1.5"
        value %= 1
        assert value == "0.5"
        value **= 2
        assert value == "0.25"

    def test_named_methods_chain(self):
        """assign_* methods return self."""
        value = MutableNumber(2)
        assert value.assign_mul(5).assign_sub(1).assign_div(3).assign_pow(2) is value
        assert value == 9
        assert value.increment().decrement().increment() == 10
        assert value.assign_mod(4) == 2

    def test_source_number_unchanged(self):
        """Building from a Number and mutating leaves the Number alone."""
        source = N("1.5")
        value = MutableNumber(source)
        value += 1
        assert source == "1.5"
        assert value == "2.5"

    def test_freeze_returns_number(self):
        """freeze() returns an immutable snapshot."""
        value = MutableNumber("1.5")
        snapshot = value.freeze()
        value += 1
        assert isinstance(snapshot, Number)
        assert snapshot == "1.5"
        assert value.number == "2.5"

    def test_failed_division_leaves_value(self):
        """A DivisionByZero leaves the previous value in place."""
        value = MutableNumber(5)
        with pytest.raises(DivisionByZero):
            value /= 0
        assert value == 5

    def test_unhashable(self):
        """MutableNumber cannot be used as a dict key."""
        with pytest.raises(TypeError):
            hash(MutableNumber(1))

    def test_float_rejected(self):
        """Float operands raise TypeError."""
        value = MutableNumber(1)
        with pytest.raises(TypeError):
            value += 1.5  # type: ignore[operator]

    def test_comparisons(self):
        """Comparisons work against Numbers, plain values and other MutableNumbers."""
        value = MutableNumber(3)
        assert value > 2
        assert value >= N(3)
        assert value < "3.5"
        assert value <= MutableNumber(3)
        assert value == MutableNumber("3.0")
        assert N(3) == value

    def test_config_is_kept(self, scale_4):
        """Results keep the config given at construction."""
        value = MutableNumber(1, scale_4)
        value /= 3
        assert str(value) == "0.3333"
        assert value.number.config is scale_4

    def test_bool_str_repr(self):
        """Conversions delegate to the current Number."""
        assert not MutableNumber(0)
        assert MutableNumber("0.5")
        assert str(MutableNumber("2.50")) == "2.5"
        assert repr(MutableNumber("2.50")) == "MutableNumber('2.5')"
