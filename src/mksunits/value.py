from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mksunits.common.schema_validate import schema_path, validate_json
from mksunits.units import DIMENSIONLESS, Unit, require_same_unit


@dataclass(frozen=True)
class Value:
    """A float magnitude in MKSA base units tagged with its Unit.

    ``+``, ``-`` and ordered comparisons require equal units and raise
    ``IncompatibleUnits`` otherwise. ``==`` across different units is ``False``.
    Plain numbers are treated as dimensionless values, so ``Value.new_scalar(2) == 2``.
    """

    magnitude: float
    unit: Unit = DIMENSIONLESS

    def __post_init__(self) -> None:
        if not isinstance(self.unit, Unit):
            raise TypeError("unit must be a Unit")
        object.__setattr__(self, "magnitude", float(self.magnitude))

    @classmethod
    def new(cls, magnitude: float, unit: Unit) -> Value:
        return cls(magnitude, unit)

    @classmethod
    def new_scalar(cls, magnitude: float) -> Value:
        return cls(magnitude, DIMENSIONLESS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Value:
        validate_json(data, schema_path("value.schema.json"))
        return cls(data["magnitude"], Unit.from_mapping(data["unit"]))

    def to_dict(self) -> dict[str, Any]:
        return {"magnitude": self.magnitude, "unit": self.unit.to_dict()}

    def is_compatible(self, other: Value) -> bool:
        return self.unit == other.unit

    def add(self, other: Value) -> Value:
        unit = require_same_unit(self.unit, other.unit, op="add")
        return Value(self.magnitude + other.magnitude, unit)

    def subtract(self, other: Value) -> Value:
        unit = require_same_unit(self.unit, other.unit, op="subtract")
        return Value(self.magnitude - other.magnitude, unit)

    def multiply(self, other: Value) -> Value:
        return Value(self.magnitude * other.magnitude, self.unit.multiply(other.unit))

    def divide(self, other: Value) -> Value:
        # ZeroDivisionError from a zero magnitude propagates unchanged.
        return Value(self.magnitude / other.magnitude, self.unit.divide(other.unit))

    def power(self, n: int) -> Value:
        # OverflowError from float ``**`` propagates; ``*`` gives inf instead.
        unit = self.unit.power(n)
        return Value(self.magnitude**n, unit)

    def sqrt(self) -> Value:
        unit = self.unit.root(2)
        return Value(math.sqrt(self.magnitude), unit)

    def cbrt(self) -> Value:
        unit = self.unit.root(3)
        if self.magnitude < 0:
            return Value(-((-self.magnitude) ** (1.0 / 3.0)), unit)
        return Value(self.magnitude ** (1.0 / 3.0), unit)

    def in_units(self, factor: float) -> float:
        """Magnitude expressed as a multiple of ``factor``, e.g. ``d.in_units(MILE)``."""
        return self.magnitude / factor

    def __add__(self, other: object) -> Value:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: object) -> Value:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: object) -> Value:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: object) -> Value:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: object) -> Value:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, other: object) -> Value:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply(self)

    def __truediv__(self, other: object) -> Value:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divide(rhs)

    def __rtruediv__(self, other: object) -> Value:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divide(self)

    def __pow__(self, n: int) -> Value:
        return self.power(n)

    def __neg__(self) -> Value:
        return Value(-self.magnitude, self.unit)

    def __pos__(self) -> Value:
        return self

    def __abs__(self) -> Value:
        return Value(abs(self.magnitude), self.unit)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.unit == rhs.unit and self.magnitude == rhs.magnitude

    def __hash__(self) -> int:
        # Dimensionless values compare equal to plain numbers, so hash like them.
        if self.unit.is_dimensionless():
            return hash(self.magnitude)
        return hash((self.magnitude, self.unit))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        require_same_unit(self.unit, rhs.unit, op="compare")
        return self.magnitude < rhs.magnitude

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        require_same_unit(self.unit, rhs.unit, op="compare")
        return self.magnitude <= rhs.magnitude

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        require_same_unit(self.unit, rhs.unit, op="compare")
        return self.magnitude > rhs.magnitude

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        require_same_unit(self.unit, rhs.unit, op="compare")
        return self.magnitude >= rhs.magnitude

    def __str__(self) -> str:
        return f"{self.magnitude} {self.unit}"

    def __format__(self, format_spec: str) -> str:
        return f"{format(self.magnitude, format_spec)} {self.unit}"


def _coerce(value: object) -> Value | None:
    if isinstance(value, Value):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return Value(value, DIMENSIONLESS)


def add(a: Value, b: Value) -> Value:
    return a.add(b)


def subtract(a: Value, b: Value) -> Value:
    return a.subtract(b)


def multiply(a: Value, b: Value) -> Value:
    return a.multiply(b)


def divide(a: Value, b: Value) -> Value:
    return a.divide(b)


def sqrt(value: Value) -> Value:
    return value.sqrt()


def cbrt(value: Value) -> Value:
    return value.cbrt()


def power(value: Value, n: int) -> Value:
    return value.power(n)


__all__ = [
    "Value",
    "add",
    "cbrt",
    "divide",
    "multiply",
    "power",
    "sqrt",
    "subtract",
]
