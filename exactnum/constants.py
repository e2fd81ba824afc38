"""Numeric and formatting constants for exactnum.

Centralizes the defaults every Number is built with and the fixed ASCII
symbols used when rendering values.
"""

from typing import Final

# Fractional digits kept by every intermediate result
DEFAULT_SCALE: Final[int] = 20

# Terms of the atanh series used by ln()
DEFAULT_LN_ITERATIONS: Final[int] = 100

# ln() still computes past this |(x-1)/(x+1)|, but convergence is slow
LN_SLOW_CONVERGENCE_BOUND: Final[str] = "0.9"

# Exponent markers accepted on input (E is canonical, e is tolerated)
EXPONENT_MARKERS: Final[tuple[str, ...]] = ("E", "e")

DECIMAL_POINT: Final[str] = "."
GROUP_SEPARATOR: Final[str] = ","
GROUP_SIZE: Final[int] = 3

# Human units keyed by power of ten (a value needs more than `index` integer
# digits to use the unit). Magnitudes past the last entry stay in "E".
HUMAN_UNITS: Final[dict[int, str]] = {
    3: "K",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
}

# Environment variables read by NumberConfig.from_env()
ENV_SCALE: Final[str] = "EXACTNUM_SCALE"
ENV_LN_ITERATIONS: Final[str] = "EXACTNUM_LN_ITERATIONS"
