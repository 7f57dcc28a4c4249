"""Roman numeral encoding.

Classical additive/subtractive notation without overlines: thousands are
written as repeated M, then hundreds, tens and ones come from fixed
tables. Zero is the empty string.
"""

from __future__ import annotations

from almanac._internal.validation import validate_non_negative
from almanac.format.writer import BoundedWriter

_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


def roman_numeral(value: int) -> str:
    """Return the Roman numeral for a non-negative integer.

    Raises:
        ValidationError: If value is negative or not an integer.

    Examples:
        >>> roman_numeral(44)
        'XLIV'
        >>> roman_numeral(1994)
        'MCMXCIV'
        >>> roman_numeral(0)
        ''
    """
    validate_non_negative("value", value)
    thousands, rest = divmod(value, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return "M" * thousands + _HUNDREDS[hundreds] + _TENS[tens] + _ONES[ones]


def write_roman(writer: BoundedWriter, value: int) -> int:
    """Write a Roman numeral into a bounded writer.

    The numeral is written whole or not at all.

    Returns:
        Number of characters written; 0 if the numeral did not fit
        (or is empty).

    Examples:
        >>> w = BoundedWriter(3)
        >>> write_roman(w, 8)
        0
        >>> write_roman(w, 9)
        2
        >>> w.getvalue()
        'IX'
    """
    return writer.write_whole(roman_numeral(value))


__all__ = ["roman_numeral", "write_roman"]
