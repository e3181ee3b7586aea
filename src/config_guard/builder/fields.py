"""Typed field builders: accumulate constraints for one field, then hand control back.

Every setter mutates the wrapped node in place and returns the same builder, so
calls chain in any order. Setters never check arguments against each other
(``min(10).max(5)`` is accepted); the loader that consumes the schema does that.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Generic, Iterable, TypeVar, Union

from config_guard.domain import (
    BooleanNode,
    NumberNode,
    NumericCheck,
    SchemaDefinition,
    StringNode,
)

if TYPE_CHECKING:
    from .schema_builder import SchemaBuilder

_N = TypeVar("_N", StringNode, NumberNode, BooleanNode)
_Self = TypeVar("_Self", bound="FieldBuilder")


class FieldBuilder(Generic[_N]):
    """Common setters and the two terminal operations shared by all kinds."""

    node_type: type

    def __init__(self, parent: "SchemaBuilder", key: str) -> None:
        self._parent = parent
        self._key = key
        self._node: _N = self.node_type()

    @property
    def node(self) -> _N:
        """The node accumulated so far."""
        return self._node

    def required(self: _Self) -> _Self:
        self._node.required = True
        return self

    def default(self: _Self, value) -> _Self:
        self._node.default = value
        return self

    def env(self: _Self, variable_name: str) -> _Self:
        self._node.env_binding = variable_name
        return self

    def description(self: _Self, text: str) -> _Self:
        self._node.description = text
        return self

    def end(self) -> "SchemaBuilder":
        """Write the node into the owning builder and return that builder."""
        self._parent.add_to_schema(self._key, self._node)
        return self._parent

    def build(self) -> SchemaDefinition:
        """Shortcut for ``end().build()`` when this is the last field."""
        return self.end().build()


class StringSchemaBuilder(FieldBuilder[StringNode]):
    node_type = StringNode

    def pattern(self, regex: Union[str, "re.Pattern[str]"]) -> "StringSchemaBuilder":
        # Compiled patterns are stored as source text so the tree stays serializable.
        self._node.pattern = regex.pattern if isinstance(regex, re.Pattern) else regex
        return self

    def enum(self, values: Iterable[str]) -> "StringSchemaBuilder":
        self._node.enum = list(values)
        return self

    def min_length(self, length: int) -> "StringSchemaBuilder":
        self._node.min_length = length
        return self

    def max_length(self, length: int) -> "StringSchemaBuilder":
        self._node.max_length = length
        return self

    def secret(self) -> "StringSchemaBuilder":
        self._node.secret = True
        return self


class NumberSchemaBuilder(FieldBuilder[NumberNode]):
    node_type = NumberNode

    def min(self, value: float) -> "NumberSchemaBuilder":
        self._node.min = value
        return self

    def max(self, value: float) -> "NumberSchemaBuilder":
        self._node.max = value
        return self

    def integer(self) -> "NumberSchemaBuilder":
        return self._add_check(NumericCheck.INTEGER)

    def positive(self) -> "NumberSchemaBuilder":
        return self._add_check(NumericCheck.POSITIVE)

    def _add_check(self, check: NumericCheck) -> "NumberSchemaBuilder":
        if check not in self._node.checks:
            self._node.checks.append(check)
        return self


class BooleanSchemaBuilder(FieldBuilder[BooleanNode]):
    node_type = BooleanNode

    def coerce(self) -> "BooleanSchemaBuilder":
        self._node.coerce = True
        return self
