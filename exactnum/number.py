"""Immutable arbitrary-precision decimal number.

Number wraps a plain decimal string kept at a fixed internal scale (20
fractional digits by default). Every operation hands the stored string, the
normalized operand and the scale to exactnum.primitive and wraps the result
in a new Number; nothing is ever mutated in place.

Usage pattern:
    from exactnum import Number, N

    total = N("1234567.891").add("1E3")
    total.format(2)            # "1,235,567.89"
    N("1500000").human_format(1)  # "1.5 M"

    # Operators delegate to the named methods
    ratio = N(1) / 3           # 0.33333333333333333333
    ratio > "0.3"              # True

Intermediate results are truncated (never rounded) to the scale; use round()
or format() to round for display.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

import structlog

from exactnum import formatting, logarithm, primitive
from exactnum.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from exactnum.constants import DECIMAL_POINT
from exactnum.errors import ParseError
from exactnum.normalize import canonical, coerce

__all__ = ["Number", "NumberLike", "N"]

logger = structlog.get_logger()

NumberLike = Union["Number", str, int, Decimal]

_OPERAND_TYPES = (str, int, Decimal)


class Number:
    """Immutable decimal value at a fixed internal scale.

    Attributes:
        value: Stored decimal string with exactly `config.scale` fractional
            digits (read-only)
        config: NumberConfig bound to this value and every value derived
            from it
    """

    __slots__ = ("_value", "_config")
    _value: str
    _config: NumberConfig

    def __init__(self, value: NumberLike = 0, config: NumberConfig | None = None) -> None:
        """Create a Number from a str, int, Decimal or another Number.

        Strings may use scientific notation ("1.5E3"). Digits beyond the
        scale are truncated. A Number argument keeps its own config unless
        one is given explicitly.

        Raises:
            ParseError: If value is a malformed literal
            TypeError: If value has an unsupported type (e.g. float)
        """
        if isinstance(value, Number):
            config = config or value._config
            raw = value._value
        else:
            config = config or DEFAULT_NUMBER_CONFIG
            raw = coerce(value, config.scale)

        self._config = config
        self._value = primitive.truncate(raw, config.scale)
        if primitive.compare(raw, self._value) != 0:
            logger.debug("input_truncated_to_scale", raw=raw, scale=config.scale)

    def _new(self, value: str) -> Number:
        """Wrap a primitive result (already at scale) without re-parsing."""
        result = object.__new__(Number)
        result._value = value
        result._config = self._config
        return result

    def _operand(self, other: NumberLike) -> str:
        if isinstance(other, Number):
            return other._value
        return coerce(other, self._config.scale)

    @property
    def value(self) -> str:
        """The stored decimal string, padded to the internal scale."""
        return self._value

    @property
    def config(self) -> NumberConfig:
        return self._config

    @property
    def scale(self) -> int:
        return self._config.scale

    def clone(self) -> Number:
        """Return an equal, independent Number."""
        return Number(self)

    # --- Arithmetic ---

    def add(self, other: NumberLike) -> Number:
        """Return self + other."""
        return self._new(primitive.add(self._value, self._operand(other), self.scale))

    def sub(self, other: NumberLike) -> Number:
        """Return self - other."""
        return self._new(primitive.sub(self._value, self._operand(other), self.scale))

    def mul(self, other: NumberLike) -> Number:
        """Return self * other."""
        return self._new(primitive.mul(self._value, self._operand(other), self.scale))

    def div(self, other: NumberLike) -> Number:
        """Return self / other, truncated to the scale.

        Raises:
            DivisionByZero: If other is zero
        """
        return self._new(primitive.div(self._value, self._operand(other), self.scale))

    def mod(self, other: NumberLike) -> Number:
        """Return the truncated-division remainder (sign of self).

        Raises:
            DivisionByZero: If other is zero
        """
        return self._new(primitive.mod(self._value, self._operand(other), self.scale))

    def pow(self, other: NumberLike) -> Number:
        """Return self raised to an integral power.

        Negative exponents give 1 / self^|other| truncated to the scale.

        Raises:
            DomainError: If other is not integral
            DivisionByZero: If self is zero and other is negative
        """
        return self._new(primitive.pow(self._value, self._operand(other), self.scale))

    def inc(self) -> Number:
        return self.add(1)

    def dec(self) -> Number:
        return self.sub(1)

    def abs(self) -> Number:
        """Absolute value."""
        return self._new(self._value.lstrip("-"))

    def neg(self) -> Number:
        """Value with the sign flipped (zero stays zero)."""
        if self.is_zero():
            return self
        if self._value.startswith("-"):
            return self._new(self._value[1:])
        return self._new("-" + self._value)

    # --- Logarithms ---

    def ln(self, iterations: int | None = None) -> Number:
        """Natural logarithm via a fixed number of atanh series terms.

        Args:
            iterations: Series terms to use (default: config.ln_iterations)

        Raises:
            DomainError: If self <= 0
        """
        terms = iterations if iterations is not None else self._config.ln_iterations
        if terms < 1:
            raise ValueError(f"iterations must be at least 1, got {terms}")
        return self._new(logarithm.ln(self._value, self.scale, terms))

    def log(self, base: NumberLike, iterations: int | None = None) -> Number:
        """Logarithm to the given base, ln(self) / ln(base).

        Raises:
            DomainError: If self <= 0 or base <= 0
            DivisionByZero: If base == 1
        """
        terms = iterations if iterations is not None else self._config.ln_iterations
        if terms < 1:
            raise ValueError(f"iterations must be at least 1, got {terms}")
        return self._new(logarithm.log(self._value, self._operand(base), self.scale, terms))

    # --- Rounding and truncation ---

    def _is_integral(self) -> bool:
        _, _, fraction = self._value.partition(DECIMAL_POINT)
        return fraction.strip("0") == ""

    def truncate(self, precision: int) -> Number:
        """Cut the fractional part to `precision` digits without rounding.

        Raises:
            ValueError: If precision is negative
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        integer, _, fraction = self.to_string().partition(DECIMAL_POINT)
        fraction = fraction[:precision]
        if fraction:
            return Number(f"{integer}{DECIMAL_POINT}{fraction}", self._config)
        return Number(integer, self._config)

    def floor(self) -> Number:
        """Greatest integer <= self."""
        truncated = self.truncate(0)
        if self.is_negative() and not self._is_integral():
            return truncated.sub(1)
        return truncated

    def ceil(self) -> Number:
        """Least integer >= self."""
        truncated = self.truncate(0)
        if self.is_positive() and not self._is_integral():
            return truncated.add(1)
        return truncated

    def round(self, precision: int = 0) -> Number:
        """Round half away from zero to `precision` fractional digits.

        Adds (or, for negative values, subtracts) half a unit of the last
        kept digit, then truncates:
            2.345  -> 2.345 + 0.005 = 2.350  -> 2.35
            -2.345 -> -2.345 - 0.005 = -2.350 -> -2.35

        Raises:
            ValueError: If precision is negative
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        half_unit = Number(f"5E-{precision + 1}", self._config)
        if self.is_negative():
            shifted = self.sub(half_unit)
        else:
            shifted = self.add(half_unit)
        return shifted.truncate(precision)

    # --- Comparison ---

    def compare_to(self, other: NumberLike) -> int:
        """Three-way compare: -1, 0 or 1."""
        return primitive.compare(self._value, self._operand(other))

    def is_equal(self, other: NumberLike) -> bool:
        return self.compare_to(other) == 0

    def is_smaller(self, other: NumberLike) -> bool:
        return self.compare_to(other) == -1

    def is_smaller_or_equal(self, other: NumberLike) -> bool:
        return self.is_smaller(other) or self.is_equal(other)

    def is_greater(self, other: NumberLike) -> bool:
        return self.compare_to(other) == 1

    def is_greater_or_equal(self, other: NumberLike) -> bool:
        return self.is_greater(other) or self.is_equal(other)

    def is_negative(self) -> bool:
        return self.is_smaller(0)

    def is_positive(self) -> bool:
        return self.is_greater(0)

    def is_zero(self) -> bool:
        return self.is_equal(0)

    # --- Formatting ---

    def to_string(self) -> str:
        """Canonical form: no trailing fractional zeros, no dangling point."""
        return canonical(self._value)

    def format(self, decimals: int = 0) -> str:
        """Round to `decimals` digits and group the integer part by thousands.

        Examples:
            Number("1234567").format()      -> "1,234,567"
            Number("1234567.891").format(2) -> "1,234,567.89"
            Number("-1234.5").format(3)     -> "-1,234.500"

        Raises:
            ValueError: If decimals is negative
        """
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")
        rounded = self.round(decimals)
        integer, _, fraction = rounded.abs().to_string().partition(DECIMAL_POINT)

        text = formatting.group_digits(integer)
        if rounded.is_negative():
            text = "-" + text
        if decimals > 0:
            text += DECIMAL_POINT + formatting.pad_fraction(fraction, decimals)
        return text

    def human_unit_index(self) -> int:
        """Power of ten used by human_value() (0, 3, 6, ..., 18)."""
        integer_digits = len(self.abs().floor().to_string())
        return formatting.human_unit_index(integer_digits)

    def human_value(self) -> Number:
        """Value scaled down to its human unit (1500000 -> 1.5)."""
        return self.div(10 ** self.human_unit_index())

    def human_unit(self) -> str:
        """Unit matching human_value(): "", K, M, G, T, P or E."""
        return formatting.human_unit(self.human_unit_index())

    def human_format(self, decimals: int = 0) -> str:
        """Grouped human value followed by its unit, e.g. "1.5 M"."""
        text = self.human_value().format(decimals)
        unit = self.human_unit()
        if unit:
            return f"{text} {unit}"
        return text

    # --- Operators ---

    def __add__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __radd__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).add(self)  # type: ignore[arg-type]

    def __sub__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).sub(self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)  # type: ignore[arg-type]

    def __rmul__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).mul(self)  # type: ignore[arg-type]

    def __truediv__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)  # type: ignore[arg-type]

    def __rtruediv__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).div(self)  # type: ignore[arg-type]

    def __mod__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return self.mod(other)  # type: ignore[arg-type]

    def __rmod__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).mod(self)  # type: ignore[arg-type]

    def __pow__(self, other: object, modulo: object = None) -> Number:
        if modulo is not None or not _is_operand(other):
            return NotImplemented
        return self.pow(other)  # type: ignore[arg-type]

    def __rpow__(self, other: object) -> Number:
        if not _is_operand(other):
            return NotImplemented
        return Number(other, self._config).pow(self)  # type: ignore[arg-type]

    def __neg__(self) -> Number:
        return self.neg()

    def __pos__(self) -> Number:
        return self

    def __abs__(self) -> Number:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        try:
            return self.is_equal(other)  # type: ignore[arg-type]
        except ParseError:
            # Non-numeric strings are simply unequal; ordering still raises
            return False

    def __lt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.is_smaller(other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.is_smaller_or_equal(other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.is_greater(other)  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.is_greater_or_equal(other)  # type: ignore[arg-type]

    def __hash__(self) -> int:
        # Consistent with Number, int and Decimal equality. Equality with str is
        # a convenience only: hash(Number("1")) != hash("1").
        return hash(Decimal(self._value))

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    def __int__(self) -> int:
        """Integer part, truncated toward zero."""
        return int(Decimal(self._value))

    def __float__(self) -> float:
        """Nearest float. Lossy: for display and interop only."""
        return float(self._value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Number('{self.to_string()}')"


def _is_operand(x: object) -> bool:
    """True for the types Number arithmetic and comparison accept."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (Number, *_OPERAND_TYPES))


# Convenience alias for concise code
N = Number
