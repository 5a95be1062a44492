"""Dimensionless scaling factors (SI prefixes and binary byte multiples)."""

from __future__ import annotations

from typing import TypeVar

from mksunits.value import Value

YOTTA = 1.0e24
ZETTA = 1.0e21
EXA = 1.0e18
PETA = 1.0e15
TERA = 1.0e12
GIGA = 1.0e9
MEGA = 1.0e6
KILO = 1.0e3
MILLI = 1.0e-3
MICRO = 1.0e-6
NANO = 1.0e-9
PICO = 1.0e-12
FEMTO = 1.0e-15
ATTO = 1.0e-18
ZEPTO = 1.0e-21
YOCTO = 1.0e-24

KILOBYTE = 1024.0
MEGABYTE = KILOBYTE * KILOBYTE
TERABYTE = MEGABYTE * KILOBYTE
PETABYTE = TERABYTE * KILOBYTE

Scalable = TypeVar("Scalable", float, Value)


def scale(amount: Scalable, factor: float) -> Scalable:
    """``scale(2.1, MEGA) == 2.1e6``; a Value keeps its unit."""
    if isinstance(amount, Value):
        return Value(amount.magnitude * factor, amount.unit)
    return amount * factor


def in_units(amount: Scalable, factor: float) -> Scalable:
    """Inverse of :func:`scale`: ``in_units(scale(2.1, MEGA), KILO) == 2100.0``."""
    if isinstance(amount, Value):
        return Value(amount.magnitude / factor, amount.unit)
    return amount / factor


__all__ = [
    "ATTO",
    "EXA",
    "FEMTO",
    "GIGA",
    "KILO",
    "KILOBYTE",
    "MEGA",
    "MEGABYTE",
    "MICRO",
    "MILLI",
    "NANO",
    "PETA",
    "PETABYTE",
    "PICO",
    "TERA",
    "TERABYTE",
    "YOCTO",
    "YOTTA",
    "ZEPTO",
    "ZETTA",
    "in_units",
    "scale",
]
