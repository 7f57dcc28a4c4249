"""Almanac: proleptic Gregorian calendar arithmetic and date formatting.

Almanac converts between broken-down civil date/time values, absolute
microsecond instants counted from 0000-01-01 00:00 UTC, and the host's
wall-clock time, and renders dates with a compact printf-style template
language.

Core Types:
    BrokenDown: Civil date/time fields with a UTC offset in minutes
    Span: Signed duration as weeks, days, hours, minutes, seconds, microseconds

Units:
    Era: BCE/CE era designation

Exceptions:
    AlmanacError: Base exception
    ValidationError: Invalid argument types or values
    OverflowError: Instant outside the 64-bit microsecond range

Example:
    >>> from almanac import make, format_date
    >>> d = make(2015, 6, 11, 21, 53, 12, 543294, 120)
    >>> format_date(d, "%0Y-%0m-%0dT%0H:%0M:%0S.%0u%t%0Z:%0z")
    '2015-06-11T21:53:12.543294+02:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Calendar primitives
from almanac._internal.calendar import (
    century,
    is_leap_year,
    leap_years_before,
    year_length,
)

# Core types and codec
from almanac.core.brokendown import BrokenDown
from almanac.core.codec import (
    decode_unix_seconds,
    decode_usec,
    encode_unix_seconds,
    encode_usec,
    fix,
    from_timeval,
    make,
    normalize,
    to_timeval,
    to_timezone,
)
from almanac.core.span import Span

# Derivations
from almanac.derive.easter import easter_in_year
from almanac.derive.iso import day_of_year, iso_week_number, iso_week_numbering_year

# Arithmetic
from almanac.arithmetic.comparisons import compare
from almanac.arithmetic.ops import add, difference, usec_difference

# Host clock
from almanac.convert.clock import now

# Formatting
from almanac.format.interpreter import default_string, format_date, format_into
from almanac.format.roman import roman_numeral
from almanac.format.writer import BoundedWriter

# Units
from almanac.units.era import Era

# Exceptions
from almanac.errors import AlmanacError, OverflowError, ValidationError

__all__: list[str] = [
    "__version__",
    # Core types
    "BrokenDown",
    "Span",
    "BoundedWriter",
    "Era",
    # Construction and codec
    "make",
    "fix",
    "normalize",
    "now",
    "to_timezone",
    "encode_usec",
    "decode_usec",
    "encode_unix_seconds",
    "decode_unix_seconds",
    "to_timeval",
    "from_timeval",
    # Calendar
    "is_leap_year",
    "year_length",
    "leap_years_before",
    "century",
    "day_of_year",
    "iso_week_number",
    "iso_week_numbering_year",
    "easter_in_year",
    # Arithmetic
    "compare",
    "usec_difference",
    "difference",
    "add",
    # Formatting
    "format_date",
    "format_into",
    "default_string",
    "roman_numeral",
    # Exceptions
    "AlmanacError",
    "ValidationError",
    "OverflowError",
]
