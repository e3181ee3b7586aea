"""Export a schema tree as a JSON Schema (draft 2020-12) document.

Keywords with no JSON Schema equivalent are kept as ``x-`` extensions:
``x-env`` (environment variable), ``x-secret`` and ``x-coerce``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from config_guard.domain import (
    ArrayNode,
    BooleanNode,
    NumberNode,
    NumericCheck,
    SchemaDefinition,
    StringNode,
    is_definition,
    is_node,
)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def _common(node, out: Dict[str, Any]) -> Dict[str, Any]:
    if node.description is not None:
        out["description"] = node.description
    # Secret defaults never leave the schema tree.
    if node.default is not None and not getattr(node, "secret", False):
        out["default"] = node.default
    if node.env_binding is not None:
        out["x-env"] = node.env_binding
    return out


def _string(node: StringNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": "string"}
    if node.pattern is not None:
        out["pattern"] = node.pattern
    if node.enum is not None:
        out["enum"] = list(node.enum)
    if node.min_length is not None:
        out["minLength"] = node.min_length
    if node.max_length is not None:
        out["maxLength"] = node.max_length
    if node.secret:
        out["writeOnly"] = True
        out["x-secret"] = True
    return _common(node, out)


def _number(node: NumberNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "type": "integer" if NumericCheck.INTEGER in node.checks else "number"
    }
    if node.min is not None:
        out["minimum"] = node.min
    if node.max is not None:
        out["maximum"] = node.max
    if NumericCheck.POSITIVE in node.checks:
        out["exclusiveMinimum"] = 0
    return _common(node, out)


def _boolean(node: BooleanNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": "boolean"}
    if node.coerce:
        out["x-coerce"] = True
    return _common(node, out)


def _array(node: ArrayNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": "array"}
    if node.items is not None:
        out["items"] = _convert(node.items)
    return _common(node, out)


def _object(definition: SchemaDefinition) -> Dict[str, Any]:
    properties = {key: _convert(value) for key, value in definition.items()}
    required = [
        key for key, value in definition.items() if is_node(value) and value.required
    ]
    out: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        out["required"] = required
    return out


_CONVERTERS = {
    StringNode: _string,
    NumberNode: _number,
    BooleanNode: _boolean,
    ArrayNode: _array,
}


def _convert(value: Any) -> Dict[str, Any]:
    if is_definition(value):
        return _object(value)
    converter = _CONVERTERS.get(type(value))
    if converter is None:
        return {}  # unconstrained
    return converter(value)


def to_json_schema(definition: SchemaDefinition, title: Optional[str] = None) -> Dict[str, Any]:
    """Return a JSON Schema document describing *definition*."""
    doc: Dict[str, Any] = {"$schema": JSON_SCHEMA_DIALECT}
    if title:
        doc["title"] = title
    doc.update(_object(definition))
    return doc
