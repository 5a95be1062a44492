#!/usr/bin/env python3
"""Period of a simple pendulum, T = 2*pi*sqrt(L/g), with unit checking."""

from __future__ import annotations

import math

from mksunits import Value
from mksunits.constants import FOOT, FOOT_UNIT, GRAV_ACCEL, GRAV_ACCEL_UNIT, TIME_UNIT


def main() -> None:
    pendulum_len = Value(6.0 * FOOT, FOOT_UNIT)
    g = Value(GRAV_ACCEL, GRAV_ACCEL_UNIT)

    print(f"Pendulum length is {pendulum_len:.2f}")
    print(f"g on Earth is {g:.2f}")

    period = 2.0 * math.pi * (pendulum_len / g).sqrt()
    if period.unit != TIME_UNIT:
        raise SystemExit(f"unexpected period unit {period.unit}")
    print(f"Pendulum period is {period:.2f}")


if __name__ == "__main__":
    main()
