"""Tests for Almanac package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_almanac() -> None:
    """Import almanac package succeeds."""
    import almanac

    assert hasattr(almanac, "__version__")
    assert almanac.__version__ == "0.1.0"


def test_public_names_resolve() -> None:
    """Every name in almanac.__all__ is defined."""
    import almanac

    for name in almanac.__all__:
        assert hasattr(almanac, name), name


def test_import_core_module() -> None:
    """Import almanac.core submodule succeeds."""
    from almanac import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import almanac.units submodule succeeds."""
    from almanac import units

    assert hasattr(units, "__all__")


def test_import_derive_module() -> None:
    """Import almanac.derive submodule succeeds."""
    from almanac import derive

    assert hasattr(derive, "__all__")


def test_import_format_module() -> None:
    """Import almanac.format submodule succeeds."""
    from almanac import format  # noqa: A004

    assert hasattr(format, "__all__")
    assert "iso-8601-t" in format.templates.TEMPLATES


def test_import_convert_module() -> None:
    """Import almanac.convert submodule succeeds."""
    from almanac import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import almanac.arithmetic submodule succeeds."""
    from almanac import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import almanac._internal submodule succeeds."""
    from almanac import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import almanac.errors succeeds with all exception classes."""
    import builtins

    from almanac.errors import AlmanacError, OverflowError, ValidationError

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, AlmanacError)
    assert issubclass(OverflowError, AlmanacError)
    assert issubclass(AlmanacError, Exception)
    assert OverflowError is not builtins.OverflowError


def test_import_constants() -> None:
    """Import almanac._internal.constants succeeds."""
    from almanac._internal.constants import (
        MAX_INSTANT,
        MIN_INSTANT,
        MONTH_LENGTHS,
        UNIX_EPOCH_DAYS,
        USEC_PER_DAY,
        USEC_PER_SECOND,
        ZERO_WEEKDAY,
    )

    assert USEC_PER_SECOND == 1_000_000
    assert USEC_PER_DAY == 86_400_000_000
    assert MIN_INSTANT == -(2**63)
    assert MAX_INSTANT == 2**63 - 1
    assert UNIX_EPOCH_DAYS == 719_528
    assert ZERO_WEEKDAY == 5
    assert sum(MONTH_LENGTHS[0]) == 365
    assert sum(MONTH_LENGTHS[1]) == 366


def test_package_logger_is_silent() -> None:
    """The package logger carries a NullHandler."""
    import logging

    import almanac  # noqa: F401

    handlers = logging.getLogger("almanac").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
