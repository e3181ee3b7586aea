"""Convert schema trees to and from plain dicts / JSON.

Node encoding: ``{"kind": <kind>, <field>: <value>, ...}`` listing only the
fields that differ from their defaults; ``checks`` is a list of strings and
``items`` is encoded recursively. A mapping whose ``"kind"`` value is a string
decodes to a node; any other mapping decodes to a nested definition.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Dict, Mapping, Tuple

from config_guard.domain import (
    NumericCheck,
    SchemaDefinition,
    SchemaFormatError,
    SchemaNode,
    is_definition,
    is_node,
)
from config_guard.domain.nodes import NODE_TYPES

logger = logging.getLogger(__name__)

REDACTED = "***"


def _field_default(f: dataclasses.Field) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return f.default_factory()  # type: ignore[misc]
    return None


def _encode(value: Any, redact_secrets: bool) -> Any:
    if is_node(value):
        return node_to_dict(value, redact_secrets)
    if is_definition(value):
        return schema_to_dict(value, redact_secrets)
    return value


def node_to_dict(node: SchemaNode, redact_secrets: bool = False) -> Dict[str, Any]:
    """Encode one node, omitting fields left at their defaults.

    With *redact_secrets*, the default of a secret string is written as ``"***"``.
    """
    secret = redact_secrets and getattr(node, "secret", False)
    out: Dict[str, Any] = {"kind": node.kind}
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        default = _field_default(f)
        if type(value) is type(default) and value == default:
            continue
        if f.name == "checks":
            value = [NumericCheck(c).value for c in value]
        elif f.name == "items":
            value = _encode(value, redact_secrets)
        elif f.name == "default" and secret:
            value = REDACTED
        elif isinstance(value, list):
            value = list(value)
        out[f.name] = value
    return out


def schema_to_dict(definition: SchemaDefinition, redact_secrets: bool = False) -> Dict[str, Any]:
    """Encode a definition as nested plain dicts (JSON-compatible)."""
    return {key: _encode(value, redact_secrets) for key, value in definition.items()}


def _decode(value: Any, path: Tuple[str, ...]) -> Any:
    if not isinstance(value, Mapping):
        raise SchemaFormatError(
            f"Expected a mapping at {'.'.join(path) or '<root>'!r}, got {type(value).__name__}"
        )
    if isinstance(value.get("kind"), str):
        return node_from_dict(value, path)
    return schema_from_dict(value, path)


def node_from_dict(data: Mapping[str, Any], path: Tuple[str, ...] = ()) -> SchemaNode:
    """Decode one node mapping such as ``{"kind": "string", "required": true}``."""
    where = ".".join(path) or "<root>"
    kind = data.get("kind")
    node_type = NODE_TYPES.get(kind) if isinstance(kind, str) else None
    if node_type is None:
        raise SchemaFormatError(
            f"Unknown node kind {kind!r} at {where!r}; expected one of {sorted(NODE_TYPES)}"
        )
    known = {f.name for f in dataclasses.fields(node_type)}
    kwargs = {k: v for k, v in data.items() if k != "kind"}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise SchemaFormatError(f"Unknown field(s) {unknown} for {kind!r} node at {where!r}")
    if "checks" in kwargs:
        try:
            kwargs["checks"] = [NumericCheck(c) for c in kwargs["checks"]]
        except (TypeError, ValueError) as exc:
            raise SchemaFormatError(f"Invalid numeric check at {where!r}: {exc}") from exc
    if kwargs.get("items") is not None:
        kwargs["items"] = _decode(kwargs["items"], path + ("[]",))
    return node_type(**kwargs)


def schema_from_dict(data: Mapping[str, Any], path: Tuple[str, ...] = ()) -> SchemaDefinition:
    """Decode nested plain dicts back into a definition of nodes."""
    if not isinstance(data, Mapping):
        raise SchemaFormatError(f"Schema must be a mapping, got {type(data).__name__}")
    return {key: _decode(value, path + (key,)) for key, value in data.items()}


def dump_json(
    definition: SchemaDefinition, indent: int = 2, redact_secrets: bool = False
) -> str:
    return json.dumps(schema_to_dict(definition, redact_secrets), indent=indent, ensure_ascii=False)


def load_json(text: str) -> SchemaDefinition:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaFormatError(f"Schema is not valid JSON: {exc}") from exc
    return schema_from_dict(data)


def coerce_item_schema(item: Any) -> Any:
    """Turn raw node mappings inside an array item schema into nodes.

    Anything that does not decode cleanly is kept as given; the builder
    accepts whatever the caller passes.
    """
    if is_node(item):
        return item
    if isinstance(item, Mapping):
        if isinstance(item.get("kind"), str):
            try:
                return node_from_dict(item)
            except SchemaFormatError as exc:
                logger.debug("Keeping array item schema as given: %s", exc)
                return item
        return {key: coerce_item_schema(value) for key, value in item.items()}
    return item
