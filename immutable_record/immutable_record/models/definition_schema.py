from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import jsonschema.validators

from .json_schema_loader import load_schema


JsonPointer = str

FIELD_DEFINITION_SCHEMA = "field_definition"
SHAPE_DEFINITION_SCHEMA = "shape_definition"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: Optional[JsonPointer] = None


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: Any) -> JsonPointer:
    token = _jp_escape(str(token))
    if not base:
        return f"/{token}"
    return f"{base}/{token}"


def validate_against_schema(
    data: Any,
    schema_name: str,
    *,
    base_path: Optional[JsonPointer] = None,
) -> List[SchemaIssue]:
    """Validate data against one of the bundled JSON Schemas.

    Args:
        data: Raw definition to validate
        schema_name: Bundled schema name (see FIELD_DEFINITION_SCHEMA, SHAPE_DEFINITION_SCHEMA)
        base_path: JSON pointer prefix for reported issue paths

    Returns:
        List of SchemaIssue objects, empty if the data is valid
    """
    schema = load_schema(schema_name)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)

    issues: List[SchemaIssue] = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = base_path or ""
        for token in error.absolute_path:
            path = join_path(path, token)
        issues.append(SchemaIssue(message=error.message, path=path))
    return issues


def format_schema_issues(issues: Iterable[SchemaIssue]) -> str:
    return "\n".join(
        f"  - {i.message}" + (f" (path={i.path})" if i.path else "")
        for i in issues
    )
