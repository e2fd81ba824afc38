"""Fixed-scale decimal primitive built on the decimal module.

Every function takes plain decimal strings plus an explicit scale and returns
a plain decimal string with exactly `scale` fractional digits. Results are
computed exactly and then truncated toward zero to the scale, never rounded:

    add("1", "2", 2)      -> "3.00"
    div("1", "3", 4)      -> "0.3333"
    div("-2", "3", 4)     -> "-0.6666"
    mod("-7", "3", 0)     -> "-1"

Arithmetic runs in local contexts only; the thread's current decimal context
is never read or modified, so the scale is the only input besides the
operands.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

from exactnum.errors import DivisionByZero, DomainError, ParseError

__all__ = [
    "EXACT_CONTEXT",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "pow",
    "compare",
    "truncate",
]

# Unbounded precision: add, sub, mul, remainder and integer powers are exact
# under this context. Division is never run under it (1/3 would not terminate).
EXACT_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    rounding=ROUND_DOWN,
)

_ZERO = Decimal(0)
_ONE = Decimal(1)


def _to_decimal(value: str) -> Decimal:
    """Parse a plain decimal string, rejecting NaN and infinities."""
    try:
        parsed = Decimal(value)
    except decimal.InvalidOperation as err:
        raise ParseError(f"Invalid decimal string: '{value}'") from err
    if not parsed.is_finite():
        raise ParseError(f"Non-finite decimal: '{value}'")
    return parsed


def _quantum(scale: int) -> Decimal:
    return Decimal((0, (1,), -scale))


def _render(value: Decimal, scale: int) -> str:
    """Truncate toward zero to `scale` digits and render without exponent."""
    truncated = value.quantize(_quantum(scale), rounding=ROUND_DOWN, context=EXACT_CONTEXT)
    if truncated.is_zero():
        # No negative zero in output
        truncated = truncated.copy_abs()
    return format(truncated, "f")


def add(a: str, b: str, scale: int) -> str:
    """Return a + b truncated to scale."""
    with decimal.localcontext(EXACT_CONTEXT):
        result = _to_decimal(a) + _to_decimal(b)
    return _render(result, scale)


def sub(a: str, b: str, scale: int) -> str:
    """Return a - b truncated to scale."""
    with decimal.localcontext(EXACT_CONTEXT):
        result = _to_decimal(a) - _to_decimal(b)
    return _render(result, scale)


def mul(a: str, b: str, scale: int) -> str:
    """Return a * b truncated to scale."""
    with decimal.localcontext(EXACT_CONTEXT):
        result = _to_decimal(a) * _to_decimal(b)
    return _render(result, scale)


def _div_decimal(dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
    """Divide with just enough precision to reach the 10^-scale digit.

    The quotient has at most `adjusted(a) - adjusted(b) + 1` integer digits,
    so that many digits plus `scale` (and one guard digit) cover every digit
    we keep. ROUND_DOWN at that precision followed by ROUND_DOWN at the scale
    is the same as a single truncation at the scale.
    """
    if divisor.is_zero():
        raise DivisionByZero(f"Division by zero: {dividend} / {divisor}")
    if dividend.is_zero():
        return _ZERO

    digits = dividend.adjusted() - divisor.adjusted() + scale + 2
    if digits < 1:
        # |quotient| < 10^-scale
        return _ZERO

    context = decimal.Context(
        prec=digits,
        rounding=ROUND_DOWN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )
    with decimal.localcontext(context):
        return dividend / divisor


def div(a: str, b: str, scale: int) -> str:
    """Return a / b truncated to scale.

    Raises:
        DivisionByZero: If b is zero
    """
    return _render(_div_decimal(_to_decimal(a), _to_decimal(b), scale), scale)


def mod(a: str, b: str, scale: int) -> str:
    """Return the remainder of truncated division, a - b * trunc(a / b).

    The result carries the sign of the dividend and may be fractional.

    Raises:
        DivisionByZero: If b is zero
    """
    dividend = _to_decimal(a)
    divisor = _to_decimal(b)
    if divisor.is_zero():
        raise DivisionByZero(f"Modulo by zero: {a} % {b}")
    with decimal.localcontext(EXACT_CONTEXT):
        result = dividend % divisor
    return _render(result, scale)


def pow(a: str, b: str, scale: int) -> str:  # noqa: A001
    """Return a raised to the integral power b, truncated to scale.

    - b == 0 gives 1 (including 0^0)
    - b > 0 computes the exact power, then truncates
    - b < 0 computes 1 / a^|b| truncated to scale

    Raises:
        DomainError: If b has a non-zero fractional part
        DivisionByZero: If a is zero and b is negative
    """
    base = _to_decimal(a)
    exponent = _to_decimal(b)
    if exponent != exponent.to_integral_value(rounding=ROUND_DOWN):
        raise DomainError(f"Exponent must be integral, got {b}")

    n = int(exponent)
    if n == 0:
        return _render(_ONE, scale)

    with decimal.localcontext(EXACT_CONTEXT):
        power = base ** abs(n)

    if n > 0:
        return _render(power, scale)
    if power.is_zero():
        raise DivisionByZero(f"Zero raised to negative power: {a} ^ {b}")
    return _render(_div_decimal(_ONE, power, scale), scale)


def compare(a: str, b: str) -> int:
    """Three-way compare: -1 if a < b, 0 if equal, 1 if a > b."""
    left = _to_decimal(a)
    right = _to_decimal(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def truncate(value: str, scale: int) -> str:
    """Return value truncated toward zero to scale fractional digits."""
    return _render(_to_decimal(value), scale)
