import pytest

from mksunits import constants
from mksunits.constants import (
    CONSTANTS,
    DAY,
    FOOT_UNIT,
    LIGHT_YEAR,
    LIGHT_YEAR_UNIT,
    SECOND_UNIT,
    SPEED_OF_LIGHT,
    SPEED_OF_LIGHT_UNIT,
    TIME_UNIT,
    UNITS,
    VELOCITY_UNIT,
    lookup,
    unit_of,
)
from mksunits.units import E_UNKNOWN_CONSTANT, UnitError, parse_unit
from mksunits.value import Value


def test_speed_of_light_times_time_is_light_year_unit() -> None:
    assert SPEED_OF_LIGHT_UNIT * TIME_UNIT == LIGHT_YEAR_UNIT
    assert LIGHT_YEAR_UNIT / SPEED_OF_LIGHT_UNIT == TIME_UNIT
    assert SPEED_OF_LIGHT_UNIT * SECOND_UNIT == LIGHT_YEAR_UNIT
    assert SPEED_OF_LIGHT_UNIT != TIME_UNIT


def test_light_year_over_speed_of_light_is_a_julian_year() -> None:
    speed = Value(SPEED_OF_LIGHT, SPEED_OF_LIGHT_UNIT)

    travel_time = Value(LIGHT_YEAR, LIGHT_YEAR_UNIT) / speed

    assert travel_time.unit == TIME_UNIT
    assert travel_time.magnitude == pytest.approx(DAY * 365.25, rel=1.0e-4)


def test_every_constant_has_matching_module_attributes() -> None:
    for name, constant in CONSTANTS.items():
        assert getattr(constants, name.upper()) == constant.magnitude
        assert getattr(constants, f"{name.upper()}_UNIT") == constant.unit
        assert UNITS[name] == constant.unit
        assert constant.description


@pytest.mark.parametrize(
    "name,expr",
    [
        ("speed_of_light", "m/s"),
        ("gravitational_constant", "m^3/kg*s^-2"),
        ("plancks_constant_h", "kg*m^2/s"),
        ("grav_accel", "m/s^2"),
        ("boltzmann", "kg*m^2/K*s^-2"),
        ("molar_gas", "kg*m^2/K*mol^-1*s^-2"),
        ("faraday", "A*s/mol"),
        ("vacuum_permittivity", "A^2*s^4/kg*m^-3"),
        ("stefan_boltzmann_constant", "kg / K^4 s^3"),
        ("lux", "cd/m^2"),
        ("psi", "kg / m s^2"),
    ],
)
def test_constant_units(name: str, expr: str) -> None:
    assert unit_of(name) == parse_unit(expr)


def test_lookup_normalizes_names() -> None:
    assert lookup("speed_of_light") is CONSTANTS["speed_of_light"]
    assert lookup("Speed of light").magnitude == SPEED_OF_LIGHT
    assert lookup("SPEED-OF-LIGHT").unit == VELOCITY_UNIT


def test_lookup_unknown_constant() -> None:
    with pytest.raises(UnitError) as excinfo:
        lookup("warp_factor")

    assert excinfo.value.code == E_UNKNOWN_CONSTANT


def test_constant_value() -> None:
    foot = lookup("foot").value()

    assert foot == Value(0.3048, FOOT_UNIT)


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CONSTANTS["foot"] = CONSTANTS["meter"]  # type: ignore[index]
    with pytest.raises(TypeError):
        UNITS["foot"] = TIME_UNIT  # type: ignore[index]
