"""exactnum - immutable arbitrary-precision decimal numbers.

This package provides:
- Number: exact fixed-scale decimal arithmetic, ln/log, rounding and
  grouped/human formatting
- MutableNumber: explicit in-place accumulator over Number
- NumberConfig: per-value scale and ln() iteration settings
"""

from exactnum.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from exactnum.errors import DivisionByZero, DomainError, NumberError, ParseError
from exactnum.mutable import MutableNumber
from exactnum.normalize import normalize
from exactnum.number import N, Number, NumberLike

__version__ = "0.1.0"
__all__ = [
    # Values
    "Number",
    "N",
    "NumberLike",
    "MutableNumber",
    # Config
    "NumberConfig",
    "DEFAULT_NUMBER_CONFIG",
    # Errors
    "NumberError",
    "ParseError",
    "DivisionByZero",
    "DomainError",
    # Functions
    "normalize",
    "__version__",
]
