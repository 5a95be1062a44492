import jsonschema

from mksunits.common.schema_validate import SCHEMA_DIR, load_schema


def test_schema_files_exist() -> None:
    schema_paths = [
        SCHEMA_DIR / "value.schema.json",
        SCHEMA_DIR / "constant_table.schema.json",
    ]
    missing = [path for path in schema_paths if not path.is_file()]
    assert not missing, f"Missing schema files: {missing}"


def test_schema_files_are_valid_draft_2020_12() -> None:
    for path in sorted(SCHEMA_DIR.glob("*.schema.json")):
        jsonschema.Draft202012Validator.check_schema(load_schema(path))
