"""Dimensional analysis for MKSA quantities."""

from mksunits.constants import CONSTANTS, UNITS, Constant, lookup
from mksunits.units import (
    BASE_DIMENSIONS,
    DIMENSIONLESS,
    BaseDimension,
    IncompatibleUnits,
    NonIntegerExponent,
    Unit,
    UnitError,
    parse_unit,
)
from mksunits.value import Value

__all__ = [
    "BASE_DIMENSIONS",
    "CONSTANTS",
    "DIMENSIONLESS",
    "UNITS",
    "BaseDimension",
    "Constant",
    "IncompatibleUnits",
    "NonIntegerExponent",
    "Unit",
    "UnitError",
    "Value",
    "lookup",
    "parse_unit",
]
