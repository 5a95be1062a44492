import math

from mksunits.constants import FOOT, FOOT_UNIT, GRAV_ACCEL_UNIT, TIME_UNIT
from mksunits.value import Value


def test_simple_pendulum_period() -> None:
    # T = 2*pi*sqrt(L/g)
    pendulum_len = Value(6.0 * FOOT, FOOT_UNIT)
    g = Value(9.81, GRAV_ACCEL_UNIT)

    assert str(pendulum_len.unit) == "[m]"
    assert str(g.unit) == "[m / s^2]"

    len_over_accel = pendulum_len / g
    assert len_over_accel.unit == TIME_UNIT * TIME_UNIT

    period = Value.new_scalar(2.0 * math.pi) * len_over_accel.sqrt()

    assert period.unit == TIME_UNIT
    assert str(period.unit) == "[s]"
    assert round(period.magnitude, 2) == 2.71
    assert f"{period:.2f}" == "2.71 [s]"
