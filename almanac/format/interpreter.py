"""printf-style formatting of BrokenDown values.

A template is copied character by character; ``%`` opens a directive.
An optional flag may follow, then exactly one directive letter selects
the field to print.

Flags:
    + - force the sign of numbers
    0 - pad with zeros
      - (a space) pad with spaces, leaving a blank where a sign would go

Without a flag, numbers print at their natural width and strings print
unpadded. With a flag, every field is padded to its default width (see
the table below); negative numbers get one extra column for the sign.

Directives:
    %%  literal %                    %H  hour 00..23
    %I  hour 01..12                  %M  minute
    %S  second                       %u  microsecond
    %s  seconds since UNIX epoch     %Y  year (year 0 is 1 BCE)
    %y  last two digits of %Y        %F  ISO week-numbering year
    %J  year without year 0          %j  last two digits of %J
    %m  month (1..12)                %d  day of the month
    %a  abbreviated month name       %A  full month name
    %r  month as Roman numeral       %R  %J as Roman numeral
    %b  abbreviated weekday name     %B  full weekday name
    %w  weekday 1..7, Monday = 1     %v  weekday 0..6, Sunday = 0
    %c  century                      %C  century as Roman numeral
    %L  CE/BCE                       %l  +/- for CE/BCE
    %W  ISO week number              %p  a.m./p.m.
    %P  AM/PM                        %t  timezone sign
    %Z  timezone hours               %z  timezone minutes
    %X  timezone offset in minutes

Unknown directive letters are skipped, and a trailing ``%`` ends the
template. Output is bounded: once the limit is reached the interpreter
stops, leaving a truncated result.

Examples:
    >>> from almanac.core.codec import make
    >>> d = make(2015, 6, 11, 21, 53, 12, 543294, 120)
    >>> format_date(d, "%0Y-%0m-%0dT%0H:%0M:%0S.%0u%t%0Z:%0z")
    '2015-06-11T21:53:12.543294+02:00'

    >>> format_date(make(-43, 3, 15, 21, 0, 0, 0, 120), "%A %d, %R %L")
    'March 15, XLIV BCE'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from almanac._internal.calendar import century
from almanac._internal.intmath import trunc_mod
from almanac.errors import ValidationError
from almanac.format.names import (
    AMPM_CAPS,
    AMPM_SMALL,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
    lookup,
)
from almanac.format.roman import write_roman
from almanac.format.writer import BoundedWriter
from almanac.units.era import Era

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown

logger = logging.getLogger(__name__)

FLAGS: frozenset[str] = frozenset("+0 ")

DEFAULT_TEMPLATE: str = "%b, %0Y-%0m-%0d %0H:%0M:%0S.%0u%t%0Z:%0z"

Field = Union[int, str]


@dataclass(frozen=True)
class Directive:
    """How one directive letter is rendered.

    Attributes:
        extract: Pulls the field out of a BrokenDown.
        width: Pad width used when a flag is present.
        roman: Render the (integer) field as a Roman numeral.
    """

    extract: Callable[[BrokenDown], Field]
    width: int = 0
    roman: bool = False


def _year_of_era(date: BrokenDown) -> int:
    return Era.from_year(date.year).year_of_era(date.year)


def _unix_seconds(date: BrokenDown) -> int:
    from almanac.core.codec import encode_unix_seconds

    return encode_unix_seconds(date)


def _iso_year(date: BrokenDown) -> int:
    from almanac.derive.iso import iso_week_numbering_year

    return iso_week_numbering_year(date)


def _iso_week(date: BrokenDown) -> int:
    from almanac.derive.iso import iso_week_number

    return iso_week_number(date)


def _afternoon(date: BrokenDown) -> int:
    return 1 if date.hour >= 12 else 0


DIRECTIVES: dict[str, Directive] = {
    "H": Directive(lambda d: d.hour, 2),
    "I": Directive(lambda d: d.hour % 12 or 12, 2),
    "M": Directive(lambda d: d.minute, 2),
    "S": Directive(lambda d: d.second, 2),
    "s": Directive(_unix_seconds, 12),
    "u": Directive(lambda d: d.microsecond, 6),
    "Y": Directive(lambda d: d.year, 4),
    "y": Directive(lambda d: trunc_mod(d.year, 100), 2),
    "F": Directive(_iso_year, 4),
    "J": Directive(_year_of_era, 4),
    "j": Directive(lambda d: _year_of_era(d) % 100, 2),
    "m": Directive(lambda d: d.month, 2),
    "d": Directive(lambda d: d.day, 2),
    "a": Directive(lambda d: lookup(MONTH_ABBREVIATIONS, d.month - 1), 3),
    "A": Directive(lambda d: lookup(MONTH_NAMES, d.month - 1), 9),
    "r": Directive(lambda d: d.month, roman=True),
    "R": Directive(_year_of_era, roman=True),
    "b": Directive(lambda d: lookup(WEEKDAY_ABBREVIATIONS, d.weekday), 3),
    "B": Directive(lambda d: lookup(WEEKDAY_NAMES, d.weekday), 3),
    "w": Directive(lambda d: d.weekday + 1, 1),
    "v": Directive(lambda d: (d.weekday + 1) % 7, 1),
    "c": Directive(lambda d: century(d.year), 2),
    "C": Directive(lambda d: century(d.year), roman=True),
    "L": Directive(lambda d: Era.from_year(d.year).value, 2),
    "l": Directive(lambda d: Era.from_year(d.year).sign, 1),
    "W": Directive(_iso_week, 2),
    "p": Directive(lambda d: AMPM_SMALL[_afternoon(d)], 3),
    "P": Directive(lambda d: AMPM_CAPS[_afternoon(d)], 3),
    "t": Directive(lambda d: "-" if d.tz_offset < 0 else "+", 1),
    "Z": Directive(lambda d: abs(d.tz_offset) // 60, 2),
    "z": Directive(lambda d: abs(d.tz_offset) % 60, 2),
    "X": Directive(lambda d: abs(d.tz_offset), 2),
}


def place_number(writer: BoundedWriter, number: int, flag: str | None, width: int) -> int:
    """Write an integer, padded to width when a flag is given.

    Padding follows printf: ``+`` forces the sign and pads with spaces,
    ``0`` pads with zeros after the sign, a space reserves a blank for
    the sign of non-negative numbers.

    Examples:
        >>> w = BoundedWriter()
        >>> place_number(w, -43, "0", 4)
        5
        >>> w.getvalue()
        '-0043'
    """
    if flag is None:
        return writer.write(str(number))
    if number < 0:
        width += 1
    return writer.write(format(number, f"{flag}{width}d"))


def place_string(writer: BoundedWriter, text: str, flag: str | None, width: int) -> int:
    """Write a string, right-justified to width when a flag is given."""
    if flag is None:
        return writer.write(text)
    return writer.write(text.rjust(width, "0" if flag == "0" else " "))


def render(date: BrokenDown, template: str, writer: BoundedWriter) -> BoundedWriter:
    """Interpret a template against a BrokenDown into a writer.

    Returns:
        The writer, for chaining.
    """
    length = len(template)
    i = 0
    while i < length and not writer.full:
        char = template[i]
        i += 1
        if char != "%":
            writer.write(char)
            continue

        if i >= length:
            break
        char = template[i]
        i += 1

        flag = None
        if char in FLAGS:
            flag = char
            if i >= length:
                break
            char = template[i]
            i += 1

        if char == "%":
            writer.write("%")
            continue

        directive = DIRECTIVES.get(char)
        if directive is None:
            logger.debug("skipping unknown directive %%%s", char)
            continue

        value = directive.extract(date)
        if directive.roman:
            write_roman(writer, abs(value))
        elif isinstance(value, str):
            place_string(writer, value, flag, directive.width)
        else:
            place_number(writer, value, flag, directive.width)

    return writer


def format_date(date: BrokenDown, template: str, limit: int | None = None) -> str:
    """Render a BrokenDown with a format template.

    Args:
        date: The value to format.
        template: Format template (see module docstring).
        limit: Maximum number of characters to produce, or None.

    Returns:
        The formatted string, truncated to ``limit`` if given.
    """
    return render(date, template, BoundedWriter(limit)).getvalue()


def format_into(date: BrokenDown, buffer: bytearray | memoryview, template: str | bytes) -> int:
    """Render into a caller-owned byte buffer, NUL-terminated.

    At most ``len(buffer) - 1`` bytes of output are written, followed by a
    NUL byte. Templates are 8-bit: ``bytes`` and ``str`` templates are
    both read as Latin-1.

    Args:
        date: The value to format.
        buffer: Writable buffer of at least one byte.
        template: Format template.

    Returns:
        Number of bytes written, not counting the terminator.

    Raises:
        ValidationError: If the buffer is empty or the template is not 8-bit.

    Examples:
        >>> from almanac.core.codec import make
        >>> buf = bytearray(8)
        >>> format_into(make(2015, 6, 11), buf, "%0Y-%0m-%0d")
        7
        >>> bytes(buf)
        b'2015-06\\x00'
    """
    if len(buffer) < 1:
        raise ValidationError("buffer must hold at least the terminator")
    if isinstance(template, bytes):
        template = template.decode("latin-1")

    text = format_date(date, template, len(buffer) - 1)
    try:
        encoded = text.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValidationError(f"template is not 8-bit text: {e}") from e

    buffer[: len(encoded)] = encoded
    buffer[len(encoded)] = 0
    return len(encoded)


def default_string(date: BrokenDown) -> str:
    """Render a BrokenDown as e.g. ``Thu, 2015-06-11 21:53:12.543294+02:00``."""
    return format_date(date, DEFAULT_TEMPLATE)


__all__ = [
    "FLAGS",
    "DEFAULT_TEMPLATE",
    "Directive",
    "DIRECTIVES",
    "place_number",
    "place_string",
    "render",
    "format_date",
    "format_into",
    "default_string",
]
