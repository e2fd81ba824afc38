"""Error classes for exactnum.

All failures raised by the numeric engine derive from NumberError, so callers
can catch the whole family at one boundary. Each concrete class also derives
from the matching builtin, so generic handlers (ValueError,
ZeroDivisionError) keep working.
"""


class NumberError(ArithmeticError):
    """Base class for exactnum arithmetic errors."""

    pass


class ParseError(NumberError, ValueError):
    """Input string is not a valid decimal literal."""

    pass


class DivisionByZero(NumberError, ZeroDivisionError):
    """Division, modulo or negative power with a zero divisor."""

    pass


class DomainError(NumberError, ValueError):
    """Argument outside the domain of the operation (e.g. ln of x <= 0)."""

    pass
