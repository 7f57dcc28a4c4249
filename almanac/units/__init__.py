"""Temporal units and designations.

This module exports:
    - Era: BCE/CE era designation
"""

from __future__ import annotations

from almanac.units.era import Era

__all__: list[str] = ["Era"]
