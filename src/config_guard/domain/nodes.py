"""Schema nodes: one dataclass per field kind. Pure data, no I/O.

A ``SchemaDefinition`` is a plain ``dict`` mapping keys to nodes or to nested
definitions (objects). Nodes carry only the constraints meaningful for their
kind; the consuming loader dispatches on ``kind`` (or on the class).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union


class NumericCheck(str, Enum):
    """Built-in predicates a number field can carry."""

    INTEGER = "integer"
    POSITIVE = "positive"


@dataclass
class _FieldNode:
    """Fields shared by every node kind."""

    kind: ClassVar[str] = ""

    required: bool = False
    default: Any = None
    env_binding: Optional[str] = None  # name of the environment variable to read
    description: Optional[str] = None


@dataclass
class StringNode(_FieldNode):
    kind: ClassVar[str] = "string"

    default: Optional[str] = None
    pattern: Optional[str] = None  # regular expression source text
    enum: Optional[List[str]] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    secret: bool = False  # loader redacts the value in any output


@dataclass
class NumberNode(_FieldNode):
    kind: ClassVar[str] = "number"

    default: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    checks: List[NumericCheck] = field(default_factory=list)


@dataclass
class BooleanNode(_FieldNode):
    kind: ClassVar[str] = "boolean"

    default: Optional[bool] = None
    coerce: bool = False  # loader may turn "true"/"0"/... into bool


@dataclass
class ArrayNode(_FieldNode):
    """Array field; ``items`` describes a single element (node or definition)."""

    kind: ClassVar[str] = "array"

    default: Optional[List[Any]] = None
    items: Any = None


SchemaNode = Union[StringNode, NumberNode, BooleanNode, ArrayNode]
SchemaDefinition = Dict[str, Union[SchemaNode, "SchemaDefinition"]]

NODE_TYPES: Dict[str, type] = {
    cls.kind: cls for cls in (StringNode, NumberNode, BooleanNode, ArrayNode)
}


def is_node(value: Any) -> bool:
    """Return ``True`` if *value* is a leaf schema node."""
    return isinstance(value, _FieldNode)


def is_definition(value: Any) -> bool:
    """Return ``True`` if *value* is a (possibly empty) nested definition."""
    return isinstance(value, dict)
