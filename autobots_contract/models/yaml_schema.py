from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from jsonschema import Draft7Validator

from .json_schema_loader import load_schema
from .parsing.yaml_parser import json_pointer_escape


JsonPointer = str


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None


def _pointer(parts) -> JsonPointer:
    return "".join(f"/{json_pointer_escape(str(p))}" for p in parts)


def validate_structure(data: Any, *, json_schema_dict: Optional[dict] = None) -> List[SchemaIssue]:
    """Check value types of a loaded contract document.

    Only types are checked here; required fields and literal values are left
    to the contract validator so they are reported with contract paths.

    Args:
        data: Loaded YAML/JSON document
        json_schema_dict: Schema to use instead of the bundled contract schema

    Returns:
        Every issue found, ordered by document path
    """
    if not isinstance(data, dict):
        return [SchemaIssue(message="Root must be a mapping/object", yaml_path="")]

    schema = json_schema_dict if json_schema_dict is not None else load_schema("contract")
    validator = Draft7Validator(schema)

    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    return [SchemaIssue(message=e.message, yaml_path=_pointer(e.absolute_path)) for e in errors]
