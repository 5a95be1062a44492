from .canonical_json import canonical_dumps_str, canonicalize
from .schema_validate import schema_path, validate_json
