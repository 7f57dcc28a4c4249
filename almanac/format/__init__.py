"""Formatting of BrokenDown values.

This module provides:
    - format_date / format_into: the printf-style template interpreter
    - default_string: the library's standard rendering
    - roman_numeral / write_roman: Roman numeral encoding
    - BoundedWriter: fixed-size output region
    - templates: named format templates

Examples:
    >>> from almanac import make
    >>> from almanac.format import format_date, templates
    >>> format_date(make(2015, 6, 11), templates.DATE)
    '2015-06-11'
"""

from __future__ import annotations

from almanac.format import templates
from almanac.format.interpreter import (
    DEFAULT_TEMPLATE,
    default_string,
    format_date,
    format_into,
)
from almanac.format.roman import roman_numeral, write_roman
from almanac.format.writer import BoundedWriter

__all__: list[str] = [
    "BoundedWriter",
    "DEFAULT_TEMPLATE",
    "default_string",
    "format_date",
    "format_into",
    "roman_numeral",
    "templates",
    "write_roman",
]
