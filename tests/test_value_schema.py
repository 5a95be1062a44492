import jsonschema
import pytest

from mksunits.common.canonical_json import canonicalize
from mksunits.common.schema_validate import schema_path, validate_json
from mksunits.constants import ACCEL_UNIT, CONSTANTS
from mksunits.value import Value


def test_value_dict_round_trip() -> None:
    g = Value(9.80665, ACCEL_UNIT)

    assert g.to_dict() == {"magnitude": 9.80665, "unit": {"L": 1, "T": -2}}
    assert Value.from_dict(g.to_dict()) == g


def test_dimensionless_value_dict() -> None:
    data = {"magnitude": 2, "unit": {}}

    assert Value.from_dict(data) == Value.new_scalar(2.0)


@pytest.mark.parametrize(
    "data",
    [
        {"unit": {"L": 1}},
        {"magnitude": "fast", "unit": {"L": 1}},
        {"magnitude": 1.0, "unit": {"L": 0.5}},
        {"magnitude": 1.0, "unit": {"ft": 1}},
        {"magnitude": 1.0, "unit": {}, "extra": True},
    ],
)
def test_value_schema_invalid(data: dict) -> None:
    with pytest.raises(jsonschema.ValidationError):
        Value.from_dict(data)


def test_constant_table_schema_valid() -> None:
    validate_json(canonicalize(dict(CONSTANTS)), schema_path("constant_table.schema.json"))


def test_constant_table_schema_rejects_missing_unit() -> None:
    payload = canonicalize(dict(CONSTANTS))
    del payload["foot"]["unit"]

    with pytest.raises(jsonschema.ValidationError):
        validate_json(payload, schema_path("constant_table.schema.json"))


def test_missing_schema_file() -> None:
    with pytest.raises(FileNotFoundError):
        schema_path("nope.schema.json")
