"""Domain layer: schema nodes and errors. No I/O."""

from .nodes import (
    ArrayNode,
    BooleanNode,
    NumberNode,
    NumericCheck,
    SchemaDefinition,
    SchemaNode,
    StringNode,
    is_definition,
    is_node,
)
from .errors import ConfigGuardError, SchemaFormatError, SchemaTargetError

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "NumberNode",
    "NumericCheck",
    "SchemaDefinition",
    "SchemaNode",
    "StringNode",
    "is_definition",
    "is_node",
    "ConfigGuardError",
    "SchemaFormatError",
    "SchemaTargetError",
]
