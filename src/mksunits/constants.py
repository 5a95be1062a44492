"""Physical constants and common units, as magnitudes in MKSA base units with their Unit.

Each entry has a magnitude (``FOOT``), a Unit (``FOOT_UNIT``) and a row in
``CONSTANTS`` keyed by snake_case name (``"foot"``).

References: GSL ``gsl_const_mksa.h``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from mksunits.units import E_UNKNOWN_CONSTANT, Unit, UnitError
from mksunits.value import Value


def _unit(**exponents: int) -> Unit:
    return Unit.from_mapping(exponents)


# Dimensions
LENGTH_UNIT = _unit(L=1)
MASS_UNIT = _unit(M=1)
TIME_UNIT = _unit(T=1)
CURRENT_UNIT = _unit(I=1)
TEMPERATURE_UNIT = _unit(THETA=1)
AMOUNT_UNIT = _unit(N=1)
LUMINOUS_INTENSITY_UNIT = _unit(J=1)
AREA_UNIT = _unit(L=2)
VOLUME_UNIT = _unit(L=3)
VELOCITY_UNIT = _unit(L=1, T=-1)
ACCEL_UNIT = _unit(L=1, T=-2)
FORCE_UNIT = _unit(L=1, M=1, T=-2)
ENERGY_UNIT = _unit(L=2, M=1, T=-2)
POWER_UNIT = _unit(L=2, M=1, T=-3)
PRESSURE_UNIT = _unit(L=-1, M=1, T=-2)
CHARGE_UNIT = _unit(T=1, I=1)
MAGNETIC_MOMENT_UNIT = _unit(L=2, I=1)
ILLUMINANCE_UNIT = _unit(L=-2, J=1)
DISTANCE_UNIT = LENGTH_UNIT

# Physical constants
SPEED_OF_LIGHT = 2.99792458e8
SPEED_OF_LIGHT_UNIT = VELOCITY_UNIT
GRAVITATIONAL_CONSTANT = 6.673e-11
GRAVITATIONAL_CONSTANT_UNIT = _unit(L=3, M=-1, T=-2)
PLANCKS_CONSTANT_H = 6.62606896e-34
PLANCKS_CONSTANT_H_UNIT = _unit(L=2, M=1, T=-1)
PLANCKS_CONSTANT_HBAR = 1.05457162825e-34
PLANCKS_CONSTANT_HBAR_UNIT = PLANCKS_CONSTANT_H_UNIT
ASTRONOMICAL_UNIT = 1.49597870691e11
ASTRONOMICAL_UNIT_UNIT = LENGTH_UNIT
LIGHT_YEAR = 9.46053620707e15
LIGHT_YEAR_UNIT = LENGTH_UNIT
PARSEC = 3.08567758135e16
PARSEC_UNIT = LENGTH_UNIT
GRAV_ACCEL = 9.80665
GRAV_ACCEL_UNIT = ACCEL_UNIT
ELECTRON_VOLT = 1.602176487e-19
ELECTRON_VOLT_UNIT = ENERGY_UNIT
MASS_ELECTRON = 9.10938188e-31
MASS_ELECTRON_UNIT = MASS_UNIT
MASS_MUON = 1.88353109e-28
MASS_MUON_UNIT = MASS_UNIT
MASS_PROTON = 1.67262158e-27
MASS_PROTON_UNIT = MASS_UNIT
MASS_NEUTRON = 1.67492716e-27
MASS_NEUTRON_UNIT = MASS_UNIT
RYDBERG = 2.17987196968e-18
RYDBERG_UNIT = ENERGY_UNIT
BOLTZMANN = 1.3806504e-23
BOLTZMANN_UNIT = _unit(L=2, M=1, T=-2, THETA=-1)
MOLAR_GAS = 8.314472
MOLAR_GAS_UNIT = _unit(L=2, M=1, T=-2, THETA=-1, N=-1)
STANDARD_GAS_VOLUME = 2.2710981e-2
STANDARD_GAS_VOLUME_UNIT = _unit(L=3, N=-1)

# Time
SECOND = 1.0
SECOND_UNIT = TIME_UNIT
MINUTE = 6.0e1
MINUTE_UNIT = TIME_UNIT
HOUR = 3.6e3
HOUR_UNIT = TIME_UNIT
DAY = 8.64e4
DAY_UNIT = TIME_UNIT
WEEK = 6.048e5
WEEK_UNIT = TIME_UNIT

# Length
METER = 1.0
METER_UNIT = LENGTH_UNIT
INCH = 2.54e-2
INCH_UNIT = LENGTH_UNIT
FOOT = 3.048e-1
FOOT_UNIT = LENGTH_UNIT
YARD = 9.144e-1
YARD_UNIT = LENGTH_UNIT
MILE = 1.609344e3
MILE_UNIT = LENGTH_UNIT
NAUTICAL_MILE = 1.852e3
NAUTICAL_MILE_UNIT = LENGTH_UNIT
FATHOM = 1.8288
FATHOM_UNIT = LENGTH_UNIT
MIL = 2.54e-5
MIL_UNIT = LENGTH_UNIT
POINT = 3.52777777778e-4
POINT_UNIT = LENGTH_UNIT
TEXPOINT = 3.51459803515e-4
TEXPOINT_UNIT = LENGTH_UNIT
MICRON = 1e-6
MICRON_UNIT = LENGTH_UNIT
ANGSTROM = 1e-10
ANGSTROM_UNIT = LENGTH_UNIT

# Area
HECTARE = 1e4
HECTARE_UNIT = AREA_UNIT
ACRE = 4.04685642241e3
ACRE_UNIT = AREA_UNIT
BARN = 1e-28
BARN_UNIT = AREA_UNIT

# Volume
LITER = 1e-3
LITER_UNIT = VOLUME_UNIT
US_GALLON = 3.78541178402e-3
US_GALLON_UNIT = VOLUME_UNIT
QUART = 9.46352946004e-4
QUART_UNIT = VOLUME_UNIT
PINT = 4.73176473002e-4
PINT_UNIT = VOLUME_UNIT
CUP = 2.36588236501e-4
CUP_UNIT = VOLUME_UNIT
FLUID_OUNCE = 2.95735295626e-5
FLUID_OUNCE_UNIT = VOLUME_UNIT
TABLESPOON = 1.47867647813e-5
TABLESPOON_UNIT = VOLUME_UNIT
TEASPOON = 4.92892159375e-6
TEASPOON_UNIT = VOLUME_UNIT
CANADIAN_GALLON = 4.54609e-3
CANADIAN_GALLON_UNIT = VOLUME_UNIT
UK_GALLON = 4.546092e-3
UK_GALLON_UNIT = VOLUME_UNIT

# Speed
MILES_PER_HOUR = 4.4704e-1
MILES_PER_HOUR_UNIT = VELOCITY_UNIT
KILOMETERS_PER_HOUR = 2.77777777778e-1
KILOMETERS_PER_HOUR_UNIT = VELOCITY_UNIT
KNOT = 5.14444444444e-1
KNOT_UNIT = VELOCITY_UNIT

# Mass
KILOGRAM = 1.0
KILOGRAM_UNIT = MASS_UNIT
POUND_MASS = 4.5359237e-1
POUND_MASS_UNIT = MASS_UNIT
OUNCE_MASS = 2.8349523125e-2
OUNCE_MASS_UNIT = MASS_UNIT
TON = 9.0718474e2
TON_UNIT = MASS_UNIT
METRIC_TON = 1e3
METRIC_TON_UNIT = MASS_UNIT
UK_TON = 1.0160469088e3
UK_TON_UNIT = MASS_UNIT
TROY_OUNCE = 3.1103475e-2
TROY_OUNCE_UNIT = MASS_UNIT
CARAT = 2e-4
CARAT_UNIT = MASS_UNIT
UNIFIED_ATOMIC_MASS = 1.660538782e-27
UNIFIED_ATOMIC_MASS_UNIT = MASS_UNIT
SOLAR_MASS = 1.98892e30
SOLAR_MASS_UNIT = MASS_UNIT

# Force
GRAM_FORCE = 9.80665e-3
GRAM_FORCE_UNIT = FORCE_UNIT
POUND_FORCE = 4.44822161526
POUND_FORCE_UNIT = FORCE_UNIT
KILOPOUND_FORCE = 4.44822161526e3
KILOPOUND_FORCE_UNIT = FORCE_UNIT
POUNDAL = 1.38255e-1
POUNDAL_UNIT = FORCE_UNIT
NEWTON = 1.0
NEWTON_UNIT = FORCE_UNIT
DYNE = 1e-5
DYNE_UNIT = FORCE_UNIT

# Energy and power
CALORIE = 4.1868
CALORIE_UNIT = ENERGY_UNIT
BTU = 1.05505585262e3
BTU_UNIT = ENERGY_UNIT
THERM = 1.05506e8
THERM_UNIT = ENERGY_UNIT
JOULE = 1.0
JOULE_UNIT = ENERGY_UNIT
ERG = 1e-7
ERG_UNIT = ENERGY_UNIT
HORSEPOWER = 7.457e2
HORSEPOWER_UNIT = POWER_UNIT

# Pressure
BAR = 1e5
BAR_UNIT = PRESSURE_UNIT
STD_ATMOSPHERE = 1.01325e5
STD_ATMOSPHERE_UNIT = PRESSURE_UNIT
TORR = 1.33322368421e2
TORR_UNIT = PRESSURE_UNIT
METER_OF_MERCURY = 1.33322368421e5
METER_OF_MERCURY_UNIT = PRESSURE_UNIT
INCH_OF_MERCURY = 3.38638815789e3
INCH_OF_MERCURY_UNIT = PRESSURE_UNIT
INCH_OF_WATER = 2.490889e2
INCH_OF_WATER_UNIT = PRESSURE_UNIT
PSI = 6.89475729317e3
PSI_UNIT = PRESSURE_UNIT

# Viscosity
POISE = 1e-1
POISE_UNIT = _unit(L=-1, M=1, T=-1)
STOKES = 1e-4
STOKES_UNIT = _unit(L=2, T=-1)

# Light (steradians are dimensionless)
STILB = 1e4
STILB_UNIT = ILLUMINANCE_UNIT
LUMEN = 1.0
LUMEN_UNIT = LUMINOUS_INTENSITY_UNIT
LUX = 1.0
LUX_UNIT = ILLUMINANCE_UNIT
PHOT = 1e4
PHOT_UNIT = ILLUMINANCE_UNIT
FOOTCANDLE = 1.076e1
FOOTCANDLE_UNIT = ILLUMINANCE_UNIT
LAMBERT = 1e4
LAMBERT_UNIT = ILLUMINANCE_UNIT
FOOTLAMBERT = 1.07639104e1
FOOTLAMBERT_UNIT = ILLUMINANCE_UNIT

# Radiation
CURIE = 3.7e10
CURIE_UNIT = _unit(T=-1)
ROENTGEN = 2.58e-4
ROENTGEN_UNIT = _unit(M=-1, T=1, I=1)
RAD = 1e-2
RAD_UNIT = _unit(L=2, T=-2)

# Atomic and electromagnetic
BOHR_RADIUS = 5.291772083e-11
BOHR_RADIUS_UNIT = LENGTH_UNIT
STEFAN_BOLTZMANN_CONSTANT = 5.67040047374e-8
STEFAN_BOLTZMANN_CONSTANT_UNIT = _unit(M=1, T=-3, THETA=-4)
THOMSON_CROSS_SECTION = 6.65245893699e-29
THOMSON_CROSS_SECTION_UNIT = AREA_UNIT
BOHR_MAGNETON = 9.27400899e-24
BOHR_MAGNETON_UNIT = MAGNETIC_MOMENT_UNIT
NUCLEAR_MAGNETON = 5.05078317e-27
NUCLEAR_MAGNETON_UNIT = MAGNETIC_MOMENT_UNIT
ELECTRON_MAGNETIC_MOMENT = 9.28476362e-24
ELECTRON_MAGNETIC_MOMENT_UNIT = MAGNETIC_MOMENT_UNIT
PROTON_MAGNETIC_MOMENT = 1.410606633e-26
PROTON_MAGNETIC_MOMENT_UNIT = MAGNETIC_MOMENT_UNIT
FARADAY = 9.64853429775e4
FARADAY_UNIT = _unit(T=1, I=1, N=-1)
ELECTRON_CHARGE = 1.602176487e-19
ELECTRON_CHARGE_UNIT = CHARGE_UNIT
VACUUM_PERMITTIVITY = 8.854187817e-12
VACUUM_PERMITTIVITY_UNIT = _unit(L=-3, M=-1, T=4, I=2)
VACUUM_PERMEABILITY = 1.25663706144e-6
VACUUM_PERMEABILITY_UNIT = _unit(L=1, M=1, T=-2, I=-2)
DEBYE = 3.33564095198e-30
DEBYE_UNIT = _unit(L=-2, T=2, I=1)
GAUSS = 1e-4
GAUSS_UNIT = _unit(M=1, T=-2, I=-1)
AMPERE = 1.0
AMPERE_UNIT = CURRENT_UNIT


@dataclass(frozen=True)
class Constant:
    name: str
    magnitude: float
    unit: Unit
    description: str

    def value(self) -> Value:
        return Value(self.magnitude, self.unit)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "magnitude": self.magnitude,
            "unit": self.unit.to_dict(),
            "description": self.description,
        }


_ROWS: tuple[tuple[str, str], ...] = (
    ("SPEED_OF_LIGHT", "Speed of light"),
    ("GRAVITATIONAL_CONSTANT", "Gravitational constant"),
    ("PLANCKS_CONSTANT_H", "Planck's constant h"),
    ("PLANCKS_CONSTANT_HBAR", "Planck's constant h bar"),
    ("ASTRONOMICAL_UNIT", "Astronomical unit"),
    ("LIGHT_YEAR", "Light year"),
    ("PARSEC", "Parsec"),
    ("GRAV_ACCEL", "Standard gravitational acceleration"),
    ("ELECTRON_VOLT", "Electron volt"),
    ("MASS_ELECTRON", "Mass of electron"),
    ("MASS_MUON", "Mass of muon"),
    ("MASS_PROTON", "Mass of proton"),
    ("MASS_NEUTRON", "Mass of neutron"),
    ("RYDBERG", "Rydberg"),
    ("BOLTZMANN", "Boltzmann constant"),
    ("MOLAR_GAS", "Molar gas constant"),
    ("STANDARD_GAS_VOLUME", "Standard gas volume"),
    ("SECOND", "Second"),
    ("MINUTE", "Minute"),
    ("HOUR", "Hour"),
    ("DAY", "Day"),
    ("WEEK", "Week"),
    ("METER", "Meter"),
    ("INCH", "Inch"),
    ("FOOT", "Foot"),
    ("YARD", "Yard"),
    ("MILE", "Mile"),
    ("NAUTICAL_MILE", "Nautical mile"),
    ("FATHOM", "Fathom"),
    ("MIL", "Mil"),
    ("POINT", "Point"),
    ("TEXPOINT", "TeX point"),
    ("MICRON", "Micron"),
    ("ANGSTROM", "Angstrom"),
    ("HECTARE", "Hectare"),
    ("ACRE", "Acre"),
    ("BARN", "Barn"),
    ("LITER", "Liter"),
    ("US_GALLON", "US gallon"),
    ("QUART", "Quart"),
    ("PINT", "Pint"),
    ("CUP", "Cup"),
    ("FLUID_OUNCE", "Fluid ounce"),
    ("TABLESPOON", "Tablespoon"),
    ("TEASPOON", "Teaspoon"),
    ("CANADIAN_GALLON", "Canadian gallon"),
    ("UK_GALLON", "UK gallon"),
    ("MILES_PER_HOUR", "Miles per hour"),
    ("KILOMETERS_PER_HOUR", "Kilometers per hour"),
    ("KNOT", "Knot"),
    ("KILOGRAM", "Kilogram"),
    ("POUND_MASS", "Pound mass"),
    ("OUNCE_MASS", "Ounce mass"),
    ("TON", "Ton"),
    ("METRIC_TON", "Metric ton"),
    ("UK_TON", "UK ton"),
    ("TROY_OUNCE", "Troy ounce"),
    ("CARAT", "Carat"),
    ("UNIFIED_ATOMIC_MASS", "Unified atomic mass"),
    ("GRAM_FORCE", "Gram force"),
    ("POUND_FORCE", "Pound force"),
    ("KILOPOUND_FORCE", "Kilopound force"),
    ("POUNDAL", "Poundal"),
    ("CALORIE", "Calorie"),
    ("BTU", "British thermal unit"),
    ("THERM", "Therm"),
    ("HORSEPOWER", "Horsepower"),
    ("BAR", "Bar"),
    ("STD_ATMOSPHERE", "Standard atmosphere"),
    ("TORR", "Torr"),
    ("METER_OF_MERCURY", "Meter of mercury"),
    ("INCH_OF_MERCURY", "Inch of mercury"),
    ("INCH_OF_WATER", "Inch of water"),
    ("PSI", "Pound per square inch"),
    ("POISE", "Poise"),
    ("STOKES", "Stokes"),
    ("STILB", "Stilb"),
    ("LUMEN", "Lumen"),
    ("LUX", "Lux"),
    ("PHOT", "Phot"),
    ("FOOTCANDLE", "Footcandle"),
    ("LAMBERT", "Lambert"),
    ("FOOTLAMBERT", "Footlambert"),
    ("CURIE", "Curie"),
    ("ROENTGEN", "Roentgen"),
    ("RAD", "Rad"),
    ("SOLAR_MASS", "Solar mass"),
    ("BOHR_RADIUS", "Bohr radius"),
    ("NEWTON", "Newton"),
    ("DYNE", "Dyne"),
    ("JOULE", "Joule"),
    ("ERG", "Erg"),
    ("STEFAN_BOLTZMANN_CONSTANT", "Stefan-Boltzmann constant"),
    ("THOMSON_CROSS_SECTION", "Thomson cross section"),
    ("BOHR_MAGNETON", "Bohr magneton"),
    ("NUCLEAR_MAGNETON", "Nuclear magneton"),
    ("ELECTRON_MAGNETIC_MOMENT", "Electron magnetic moment"),
    ("PROTON_MAGNETIC_MOMENT", "Proton magnetic moment"),
    ("FARADAY", "Faraday constant"),
    ("ELECTRON_CHARGE", "Electron charge"),
    ("VACUUM_PERMITTIVITY", "Vacuum permittivity"),
    ("VACUUM_PERMEABILITY", "Vacuum permeability"),
    ("DEBYE", "Debye"),
    ("GAUSS", "Gauss"),
    ("AMPERE", "Ampere"),
)

_module = globals()

CONSTANTS: Mapping[str, Constant] = MappingProxyType(
    {
        key.lower(): Constant(
            name=key.lower(),
            magnitude=_module[key],
            unit=_module[f"{key}_UNIT"],
            description=description,
        )
        for key, description in _ROWS
    }
)

UNITS: Mapping[str, Unit] = MappingProxyType(
    {name: constant.unit for name, constant in CONSTANTS.items()}
)


def lookup(name: str) -> Constant:
    """Find a constant by name; ``"Speed of light"``, ``"speed-of-light"`` and
    ``"SPEED_OF_LIGHT"`` all resolve to ``"speed_of_light"``."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return CONSTANTS[key]
    except KeyError as exc:
        raise UnitError(E_UNKNOWN_CONSTANT, f"Constant '{name}' is not known") from exc


def unit_of(name: str) -> Unit:
    return lookup(name).unit
