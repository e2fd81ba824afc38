"""In-place accumulator over the immutable Number.

Number never changes once built; `x += 1` on a Number rebinds `x` to a new
instance. MutableNumber is the explicit exception for code that wants a
single object updated in place (counters, running totals):

    total = MutableNumber(0)
    for amount in amounts:
        total += amount          # same MutableNumber, new inner Number
    result = total.freeze()      # immutable snapshot

A MutableNumber is meant to be owned by one caller. It does no locking, so
sharing one across threads needs external synchronization; share the frozen
Number instead.
"""

from __future__ import annotations

from exactnum.config import NumberConfig
from exactnum.number import Number, NumberLike, _is_operand

__all__ = ["MutableNumber"]


class MutableNumber:
    """Mutable holder of a current Number value.

    Attributes:
        number: The current immutable value (read-only)
    """

    __slots__ = ("_number",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since it mutates

    def __init__(self, value: NumberLike = 0, config: NumberConfig | None = None) -> None:
        self._number = Number(value, config)

    @property
    def number(self) -> Number:
        """The current value."""
        return self._number

    def freeze(self) -> Number:
        """Return the current value as an immutable Number."""
        return self._number

    # --- In-place operations ---

    def assign_add(self, other: NumberLike) -> MutableNumber:
        self._number = self._number.add(other)
        return self

    def assign_sub(self, other: NumberLike) -> MutableNumber:
        self._number = self._number.sub(other)
        return self

    def assign_mul(self, other: NumberLike) -> MutableNumber:
        self._number = self._number.mul(other)
        return self

    def assign_div(self, other: NumberLike) -> MutableNumber:
        """Divide in place.

        Raises:
            DivisionByZero: If other is zero (the value is left unchanged)
        """
        self._number = self._number.div(other)
        return self

    def assign_mod(self, other: NumberLike) -> MutableNumber:
        """Replace the value with its remainder.

        Raises:
            DivisionByZero: If other is zero (the value is left unchanged)
        """
        self._number = self._number.mod(other)
        return self

    def assign_pow(self, other: NumberLike) -> MutableNumber:
        self._number = self._number.pow(other)
        return self

    def increment(self) -> MutableNumber:
        return self.assign_add(1)

    def decrement(self) -> MutableNumber:
        return self.assign_sub(1)

    # --- Augmented assignment ---

    def __iadd__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_add(other)  # type: ignore[arg-type]

    def __isub__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_sub(other)  # type: ignore[arg-type]

    def __imul__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_mul(other)  # type: ignore[arg-type]

    def __itruediv__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_div(other)  # type: ignore[arg-type]

    def __imod__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_mod(other)  # type: ignore[arg-type]

    def __ipow__(self, other: object) -> MutableNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.assign_pow(other)  # type: ignore[arg-type]

    # --- Comparison and conversion ---

    def __eq__(self, other: object) -> bool:
        return self._number.__eq__(_unwrap(other))

    def __lt__(self, other: object) -> bool:
        return self._number.__lt__(_unwrap(other))

    def __le__(self, other: object) -> bool:
        return self._number.__le__(_unwrap(other))

    def __gt__(self, other: object) -> bool:
        return self._number.__gt__(_unwrap(other))

    def __ge__(self, other: object) -> bool:
        return self._number.__ge__(_unwrap(other))

    def __bool__(self) -> bool:
        return bool(self._number)

    def __str__(self) -> str:
        return str(self._number)

    def __repr__(self) -> str:
        return f"MutableNumber('{self._number}')"


def _unwrap(x: object) -> object:
    if isinstance(x, MutableNumber):
        return x._number
    return x
