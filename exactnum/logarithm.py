"""Logarithms on fixed-scale decimal strings.

ln(x) = 2 * atanh(b) = 2 * (b + b^3/3 + b^5/5 + ...), with b = (x-1)/(x+1)

The series converges for every x > 0 (|b| < 1), but slowly once |b| gets
close to 1, i.e. for x near 0 or very large x. The number of terms is fixed
by the caller rather than derived from the requested precision, so the cost
of a call is bounded. Each term is truncated to the scale before it is
accumulated.
"""

from __future__ import annotations

import structlog

from exactnum import primitive
from exactnum.constants import LN_SLOW_CONVERGENCE_BOUND
from exactnum.errors import DivisionByZero, DomainError

__all__ = ["ln", "log"]

logger = structlog.get_logger()


def _abs(value: str) -> str:
    return value.lstrip("-")


def ln(x: str, scale: int, iterations: int) -> str:
    """Natural logarithm of x via the atanh series.

    Args:
        x: Plain decimal string, must be positive
        scale: Fractional digits kept by every intermediate result
        iterations: Maximum number of series terms

    Returns:
        ln(x) as a plain decimal string with `scale` fractional digits

    Raises:
        DomainError: If x <= 0
    """
    if primitive.compare(x, "0") <= 0:
        raise DomainError(f"ln is undefined for non-positive argument {x}")

    base = primitive.div(primitive.sub(x, "1", scale), primitive.add(x, "1", scale), scale)
    if primitive.compare(_abs(base), LN_SLOW_CONVERGENCE_BOUND) > 0:
        logger.warning(
            "ln_slow_convergence",
            argument=x,
            series_base=base,
            iterations=iterations,
        )

    total = "0"
    terms_used = 0
    for i in range(iterations):
        power = str(2 * i + 1)
        numerator = primitive.pow(base, power, scale)
        # |b| < 1: once a power truncates to zero every later one does too
        if primitive.compare(numerator, "0") == 0:
            break
        term = primitive.mul(numerator, primitive.div("1", power, scale), scale)
        total = primitive.add(total, term, scale)
        terms_used += 1

    result = primitive.mul(total, "2", scale)
    logger.debug("ln_series_computed", argument=x, terms_used=terms_used, result=result)
    return result


def log(x: str, base: str, scale: int, iterations: int) -> str:
    """Logarithm of x to the given base, ln(x) / ln(base).

    Raises:
        DomainError: If x <= 0 or base <= 0
        DivisionByZero: If ln(base) is zero at the scale (base == 1)
    """
    if primitive.compare(base, "0") <= 0:
        raise DomainError(f"Logarithm base must be positive, got {base}")
    ln_base = ln(base, scale, iterations)
    # Bases within 10^-scale of 1 have ln(base) == 0 at this scale
    if primitive.compare(ln_base, "0") == 0:
        raise DivisionByZero(f"Logarithm base must not be 1, got {base}")
    return primitive.div(ln(x, scale, iterations), ln_base, scale)
