from __future__ import annotations

"""Translate user-authored JSON schemas into the structured-output envelope.

The translation keeps leaf typing intact: ``additionalProperties: False`` must
reach the wire as the JSON literal ``false``; the remote validator rejects the
string ``"false"``.
"""

import math
from typing import Any, Dict, List, Mapping

from .errors import ValidationError
from .types import StructuredOutputSpec

# Keys whose value is a mapping of name -> schema node
_NODE_MAPS = ("properties", "$defs", "definitions", "patternProperties")


def validate_schema(spec: Mapping[str, Any]) -> bool:
    if not isinstance(spec, Mapping):
        raise ValidationError("Schema spec must be a mapping with 'name' and 'schema'")
    if "name" not in spec:
        raise ValidationError("Schema must include a 'name' field")
    if "schema" not in spec:
        raise ValidationError("Schema must include a 'schema' field with the JSON schema definition")
    schema_def = spec["schema"]
    if not isinstance(schema_def, Mapping) or "type" not in schema_def:
        raise ValidationError("Schema definition must include a 'type' field")
    return True


def to_response_format(spec: Mapping[str, Any]) -> StructuredOutputSpec:
    """Build the provider envelope from ``{"name": ..., "schema": {...}}``."""
    validate_schema(spec)
    return StructuredOutputSpec(
        name=str(spec["name"]),
        strict=True,
        schema=translate_node(spec["schema"]),
    )


def translate_node(node: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively copy a schema node, preserving key order and leaf types."""
    out: Dict[str, Any] = {}
    for key, value in node.items():
        if key in _NODE_MAPS and isinstance(value, Mapping):
            out[key] = {name: _translate_value(sub) for name, sub in value.items()}
        elif key == "items" and isinstance(value, Mapping):
            out[key] = translate_node(value)
        elif key == "required":
            out[key] = _required_list(value)
        else:
            out[key] = _translate_value(value)
    return out


def _required_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"'required' must be a list of property names, got {value!r}")
    return [str(item) for item in value]


def _translate_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return translate_node(value)
    if isinstance(value, (list, tuple)):
        return [_translate_value(item) for item in value]
    # bool is checked before int/float: bool is an int subclass
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"Schema values must be finite numbers, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    return str(value)
