"""Input normalization for exactnum.

Turns user input into plain decimal strings the primitive understands:

    normalize("42")      -> "42"      (no exponent: returned unchanged)
    normalize("1.5E3")   -> "1500"
    normalize("2E-2")    -> "0.02"

Scientific notation is resolved as mantissa * 10^exponent at the given scale,
so exponents that push digits past the scale truncate them like any other
result.
"""

from __future__ import annotations

import re
from decimal import Decimal

from exactnum import primitive
from exactnum.constants import DECIMAL_POINT, DEFAULT_SCALE, EXPONENT_MARKERS
from exactnum.errors import ParseError

__all__ = ["normalize", "coerce", "canonical"]

_MANTISSA = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_EXPONENT = re.compile(r"[+-]?[0-9]+")
_MARKER_SPLIT = re.compile("|".join(re.escape(marker) for marker in EXPONENT_MARKERS))


def normalize(raw: str, scale: int = DEFAULT_SCALE) -> str:
    """Resolve scientific notation into a plain decimal string.

    Args:
        raw: Decimal literal, optionally with an E/e exponent suffix
        scale: Fractional digits kept when applying the exponent

    Returns:
        `raw` itself when it has no exponent, otherwise the canonical
        (trailing-zero-stripped) value of mantissa * 10^exponent

    Raises:
        ParseError: If raw is not a valid literal or has more than one
            exponent marker
    """
    if not isinstance(raw, str):
        raise ParseError(f"Expected a decimal string, got {type(raw).__name__}")

    parts = _MARKER_SPLIT.split(raw)
    if len(parts) == 1:
        if not _MANTISSA.fullmatch(raw):
            raise ParseError(f"Invalid decimal literal: '{raw}'")
        return raw

    if len(parts) != 2:
        raise ParseError(f"Multiple exponent markers in '{raw}'")

    mantissa, exponent = parts
    if not _MANTISSA.fullmatch(mantissa):
        raise ParseError(f"Invalid mantissa in '{raw}'")
    if not _EXPONENT.fullmatch(exponent):
        raise ParseError(f"Invalid exponent in '{raw}'")

    magnitude = primitive.pow("10", exponent, scale)
    return canonical(primitive.mul(mantissa, magnitude, scale))


def coerce(value: str | int | Decimal, scale: int = DEFAULT_SCALE) -> str:
    """Convert an operand to a normalized decimal string.

    Floats are rejected: their binary representation is exactly the error
    this library exists to avoid. Pass str(x) explicitly if that is intended.

    Raises:
        TypeError: If value is not a str, int or Decimal
        ParseError: If value is malformed or non-finite
    """
    if isinstance(value, bool):
        raise TypeError("Number does not accept bool operands")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"Non-finite decimal: {value}")
        return normalize(str(value), scale)
    if isinstance(value, str):
        return normalize(value, scale)
    raise TypeError(f"Number requires str, int or Decimal, got {type(value).__name__}")


def canonical(value: str) -> str:
    """Strip trailing fractional zeros and a dangling decimal point.

    Examples:
        >>> canonical("2.50000")
        '2.5'
        >>> canonical("3.000")
        '3'
        >>> canonical("-0.00")
        '0'
    """
    if DECIMAL_POINT in value:
        value = value.rstrip("0").rstrip(DECIMAL_POINT)
    if value in ("-0", ""):
        return "0"
    return value
