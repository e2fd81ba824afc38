"""String helpers for grouped and human-scaled rendering."""

from __future__ import annotations

from exactnum.constants import GROUP_SEPARATOR, GROUP_SIZE, HUMAN_UNITS

__all__ = ["group_digits", "pad_fraction", "human_unit_index", "human_unit"]


def group_digits(digits: str, separator: str = GROUP_SEPARATOR, size: int = GROUP_SIZE) -> str:
    """Insert `separator` every `size` digits, counting from the right.

    Examples:
        >>> group_digits("1234567")
        '1,234,567'
        >>> group_digits("123")
        '123'
    """
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[i : i + size] for i in range(head, len(digits), size))
    return separator.join(groups)


def pad_fraction(fraction: str, decimals: int) -> str:
    """Right-pad fractional digits with zeros to exactly `decimals` digits."""
    return fraction[:decimals].ljust(decimals, "0")


def human_unit_index(integer_digits: int) -> int:
    """Largest unit threshold strictly below the integer digit count.

    A value with 7 integer digits (millions) maps to 6, one with 3 digits
    maps to 0 (no unit). Anything past the table stays at the last entry.
    """
    index = 0
    for threshold in sorted(HUMAN_UNITS):
        if integer_digits - 1 < threshold:
            break
        index = threshold
    return index


def human_unit(index: int) -> str:
    """Unit symbol for a threshold from human_unit_index ("" for 0)."""
    return HUMAN_UNITS.get(index, "")
