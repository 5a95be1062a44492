from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

E_INCOMPATIBLE_UNITS = "E_INCOMPATIBLE_UNITS"
E_NON_INTEGER_EXPONENT = "E_NON_INTEGER_EXPONENT"
E_UNIT_INVALID = "E_UNIT_INVALID"
E_UNKNOWN_UNIT = "E_UNKNOWN_UNIT"
E_UNKNOWN_CONSTANT = "E_UNKNOWN_CONSTANT"


class BaseDimension(str, Enum):
    L = "L"
    M = "M"
    T = "T"
    I = "I"  # noqa: E741
    THETA = "THETA"
    N = "N"
    J = "J"


# Canonical order: length, mass, time, current, temperature, amount, luminosity.
BASE_DIMENSIONS: tuple[BaseDimension, ...] = (
    BaseDimension.L,
    BaseDimension.M,
    BaseDimension.T,
    BaseDimension.I,
    BaseDimension.THETA,
    BaseDimension.N,
    BaseDimension.J,
)

BASE_SYMBOLS: dict[BaseDimension, str] = {
    BaseDimension.L: "m",
    BaseDimension.M: "kg",
    BaseDimension.T: "s",
    BaseDimension.I: "A",
    BaseDimension.THETA: "K",
    BaseDimension.N: "mol",
    BaseDimension.J: "cd",
}


class UnitError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


class IncompatibleUnits(UnitError):
    def __init__(self, left: Unit, right: Unit, *, op: str) -> None:
        self.left = left
        self.right = right
        self.op = op
        super().__init__(E_INCOMPATIBLE_UNITS, f"cannot {op} {left} and {right}")


class NonIntegerExponent(UnitError):
    def __init__(self, message: str) -> None:
        super().__init__(E_NON_INTEGER_EXPONENT, message)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Unit:
    """A physical dimension as integer exponents over the seven MKSA base dimensions."""

    exponents: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "exponents", tuple(self.exponents))
        if len(self.exponents) != len(BASE_DIMENSIONS):
            raise UnitError(E_UNIT_INVALID, "Unit must include all base dimension exponents")
        for base, exp in zip(BASE_DIMENSIONS, self.exponents, strict=True):
            if not _is_int(exp):
                raise UnitError(E_UNIT_INVALID, f"Exponent for {base.value} must be int")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> Unit:
        known = {base.value for base in BASE_DIMENSIONS}
        for key in mapping:
            if key not in known:
                raise UnitError(E_UNIT_INVALID, f"Unknown base dimension '{key}'")
        return cls(tuple(mapping.get(base.value, 0) for base in BASE_DIMENSIONS))

    @property
    def mapping(self) -> dict[str, int]:
        return {base.value: exp for base, exp in zip(BASE_DIMENSIONS, self.exponents, strict=True)}

    def to_dict(self) -> dict[str, int]:
        return {key: exp for key, exp in self.mapping.items() if exp != 0}

    def is_dimensionless(self) -> bool:
        return all(exp == 0 for exp in self.exponents)

    def is_compatible(self, other: Unit) -> bool:
        return self == other

    def multiply(self, other: Unit) -> Unit:
        return Unit(tuple(a + b for a, b in zip(self.exponents, other.exponents, strict=True)))

    def divide(self, other: Unit) -> Unit:
        return Unit(tuple(a - b for a, b in zip(self.exponents, other.exponents, strict=True)))

    def power(self, n: int) -> Unit:
        if not _is_int(n):
            raise NonIntegerExponent(f"Power must be an integer, got {n!r}")
        return Unit(tuple(exp * n for exp in self.exponents))

    def root(self, n: int) -> Unit:
        if not _is_int(n) or n <= 0:
            raise NonIntegerExponent(f"Root degree must be a positive integer, got {n!r}")
        for base, exp in zip(BASE_DIMENSIONS, self.exponents, strict=True):
            if exp % n != 0:
                raise NonIntegerExponent(
                    f"{BASE_SYMBOLS[base]}^{exp} has no integer root of degree {n}"
                )
        return Unit(tuple(exp // n for exp in self.exponents))

    def __mul__(self, other: object) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, n: int) -> Unit:
        return self.power(n)

    def as_string(self) -> str:
        """Render without brackets, e.g. ``kg m^2 / s^2``; dimensionless is empty."""
        positive = [(base, exp) for base, exp in zip(BASE_DIMENSIONS, self.exponents) if exp > 0]
        negative = [(base, -exp) for base, exp in zip(BASE_DIMENSIONS, self.exponents) if exp < 0]
        if not positive and not negative:
            return ""
        text = _join_terms(positive) if positive else "1"
        if negative:
            text += " / " + _join_terms(negative)
        return text

    def __str__(self) -> str:
        return f"[{self.as_string()}]"


def _join_terms(terms: list[tuple[BaseDimension, int]]) -> str:
    parts = []
    for base, exp in terms:
        symbol = BASE_SYMBOLS[base]
        parts.append(symbol if exp == 1 else f"{symbol}^{exp}")
    return " ".join(parts)


DIMENSIONLESS = Unit(tuple(0 for _ in BASE_DIMENSIONS))


def multiply(a: Unit, b: Unit) -> Unit:
    return a.multiply(b)


def divide(a: Unit, b: Unit) -> Unit:
    return a.divide(b)


def power(unit: Unit, n: int) -> Unit:
    return unit.power(n)


def root(unit: Unit, n: int) -> Unit:
    return unit.root(n)


def equals(a: Unit, b: Unit) -> bool:
    return a == b


def to_string(unit: Unit) -> str:
    return str(unit)


def require_same_unit(left: Unit, right: Unit, *, op: str) -> Unit:
    if left != right:
        raise IncompatibleUnits(left, right, op=op)
    return left


_SYMBOL_UNIT_MAP: dict[str, Unit] = {
    symbol: Unit.from_mapping({base.value: 1}) for base, symbol in BASE_SYMBOLS.items()
}

_TOKEN_RE = re.compile(r"\*|/|[^\s*/]+")
_FACTOR_RE = re.compile(r"^([A-Za-z]+)(?:\^(-?\d+))?$")


def parse_unit(text: str) -> Unit:
    """Parse ``m/s^2``, ``kg*m^2/s^2``, ``1`` or a rendered form such as ``[m / s^2]``.

    Factors are base symbols with an optional integer exponent. An operator applies
    to every factor after it until the next operator, so ``kg / m s^2`` reads as
    ``kg / (m s^2)``.
    """
    if not isinstance(text, str):
        raise UnitError(E_UNIT_INVALID, "Unit expression must be a string")
    cleaned = text.strip()
    if cleaned.startswith("[") and cleaned.endswith("]"):
        cleaned = cleaned[1:-1].strip()
        if cleaned == "":
            return DIMENSIONLESS
    if cleaned == "":
        raise UnitError(E_UNIT_INVALID, "Empty unit expression")

    unit = DIMENSIONLESS
    operation = "*"
    expect_factor = True
    for token in _TOKEN_RE.findall(cleaned):
        if token in {"*", "/"}:
            if expect_factor:
                raise UnitError(E_UNIT_INVALID, f"Malformed unit expression '{text}'")
            operation = token
            expect_factor = True
            continue
        factor = _parse_factor(token)
        if operation == "*":
            unit = unit.multiply(factor)
        else:
            unit = unit.divide(factor)
        expect_factor = False
    if expect_factor:
        raise UnitError(E_UNIT_INVALID, f"Malformed unit expression '{text}'")
    return unit


def _parse_factor(token: str) -> Unit:
    if token == "1":
        return DIMENSIONLESS
    match = _FACTOR_RE.match(token)
    if match is None:
        raise UnitError(E_UNIT_INVALID, f"Malformed unit factor '{token}'")
    symbol, exp_text = match.groups()
    if symbol not in _SYMBOL_UNIT_MAP:
        raise UnitError(E_UNKNOWN_UNIT, f"Unknown unit '{symbol}'")
    exp = int(exp_text) if exp_text is not None else 1
    return _SYMBOL_UNIT_MAP[symbol].power(exp)


__all__ = [
    "BASE_DIMENSIONS",
    "BASE_SYMBOLS",
    "DIMENSIONLESS",
    "E_INCOMPATIBLE_UNITS",
    "E_NON_INTEGER_EXPONENT",
    "E_UNIT_INVALID",
    "E_UNKNOWN_CONSTANT",
    "E_UNKNOWN_UNIT",
    "BaseDimension",
    "IncompatibleUnits",
    "NonIntegerExponent",
    "Unit",
    "UnitError",
    "divide",
    "equals",
    "multiply",
    "parse_unit",
    "power",
    "require_same_unit",
    "root",
    "to_string",
]
