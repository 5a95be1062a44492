from __future__ import annotations

import argparse
import math

from mksunits.common.canonical_json import canonical_dumps_str, canonicalize
from mksunits.common.schema_validate import schema_path, validate_json
from mksunits.constants import ACCEL_UNIT, CONSTANTS, GRAV_ACCEL, LENGTH_UNIT, lookup
from mksunits.units import UnitError, parse_unit
from mksunits.value import Value


def _cmd_list(args: argparse.Namespace) -> int:
    for name, constant in CONSTANTS.items():
        print(f"{name:<28} {constant.magnitude:<22.12g} {str(constant.unit):<22} {constant.description}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    try:
        constant = lookup(args.name)
    except UnitError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"{constant.description}: {constant.magnitude:.12g} {constant.unit}")
    return 0


def _cmd_unit(args: argparse.Namespace) -> int:
    try:
        unit = parse_unit(args.expr)
    except UnitError as exc:
        raise SystemExit(str(exc)) from exc
    print(unit)
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    payload = canonicalize(dict(CONSTANTS))
    validate_json(payload, schema_path("constant_table.schema.json"))
    print(canonical_dumps_str(payload))
    return 0


def _cmd_pendulum(args: argparse.Namespace) -> int:
    length = Value(args.length, LENGTH_UNIT)
    g = Value(args.g, ACCEL_UNIT)
    try:
        period = 2.0 * math.pi * (length / g).sqrt()
    except (ZeroDivisionError, ValueError) as exc:
        raise SystemExit(f"cannot compute period for length={args.length} g={args.g}: {exc}") from exc
    print(f"{period:.{args.precision}f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mksunits", description="MKSA units and physical constants")
    sub = p.add_subparsers(dest="cmd", required=True)

    list_cmd = sub.add_parser("list", help="List all constants")
    list_cmd.set_defaults(func=_cmd_list)

    show = sub.add_parser("show", help="Show one constant")
    show.add_argument("name", help="Constant name, e.g. speed_of_light")
    show.set_defaults(func=_cmd_show)

    unit = sub.add_parser("unit", help="Render a unit expression in canonical form")
    unit.add_argument("expr", help="Unit expression, e.g. 'kg*m^2/s^2'")
    unit.set_defaults(func=_cmd_unit)

    dump = sub.add_parser("dump", help="Write the constant table as canonical JSON")
    dump.set_defaults(func=_cmd_dump)

    pendulum = sub.add_parser("pendulum", help="Period of a simple pendulum")
    pendulum.add_argument("length", type=float, help="Pendulum length in meters")
    pendulum.add_argument("--g", type=float, default=GRAV_ACCEL, help="Gravitational acceleration in m/s^2")
    pendulum.add_argument("--precision", type=int, default=2)
    pendulum.set_defaults(func=_cmd_pendulum)

    return p


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
