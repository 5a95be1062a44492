import pytest

from mksunits.scale import KILO, KILOBYTE, MEGA, MEGABYTE, MILLI, PETABYTE, TERABYTE, in_units, scale
from mksunits.units import Unit
from mksunits.value import Value


def test_scale_and_in_units_floats() -> None:
    assert scale(2.1, MEGA) == pytest.approx(2.1e6)
    assert in_units(scale(2.1, MEGA), KILO) == pytest.approx(2100.0)
    assert KILO == 1000.0


def test_byte_multiples_are_binary() -> None:
    assert MEGABYTE == 1024.0**2
    assert TERABYTE == 1024.0**3
    assert PETABYTE == 1024.0**4


def test_scale_value_keeps_unit() -> None:
    length = Unit.from_mapping({"L": 1})

    scaled = scale(Value(5.0, length), MILLI)

    assert scaled.magnitude == pytest.approx(0.005)
    assert scaled.unit == length
    assert in_units(scaled, MILLI).magnitude == pytest.approx(5.0)
