"""Root/nested schema builder.

A builder owns a local mapping and exposes factory methods for field builders
and nested objects. A nested builder is created per ``object()`` call with a
back-reference ``(parent, parent_key)``; it never mutates the parent while the
caller populates it, only when folding its result upward.

Placement rule for ``object()`` and ``array()``:

- root builder: the new entry goes into the local mapping under ``key``;
- nested builder: the fragment ``{key: entry}`` is written through to the
  parent under this builder's own ``parent_key``.

The parent later folds this builder's local mapping into the same slot, so
both halves meet at the right path. Folding merges definitions key by key,
which keeps the result correct at any nesting depth.

Usage::

    schema = (
        create_schema_builder()
        .string("host").env("DB_HOST").default("localhost").required().end()
        .number("port").min(1).max(65535).default(5432).end()
        .object("cache", lambda b: b.boolean("enabled").default(True).end())
        .build()
    )
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

from config_guard.domain import (
    ArrayNode,
    SchemaDefinition,
    SchemaNode,
    is_definition,
)
from config_guard.schema.serialize import coerce_item_schema

from .fields import BooleanSchemaBuilder, NumberSchemaBuilder, StringSchemaBuilder

logger = logging.getLogger(__name__)


def _merge(existing: Any, incoming: Any) -> Any:
    """Deep-merge two definitions; anything else is replaced by *incoming*."""
    if not (is_definition(existing) and is_definition(incoming)):
        return incoming
    merged = dict(existing)
    for key, value in incoming.items():
        merged[key] = _merge(merged[key], value) if key in merged else value
    return merged


class SchemaBuilder:
    """Accumulate a flat or nested schema mapping through chained calls."""

    def __init__(
        self,
        parent: Optional["SchemaBuilder"] = None,
        parent_key: Optional[str] = None,
    ) -> None:
        self._schema: SchemaDefinition = {}
        self._parent = parent
        self._parent_key = parent_key

    @property
    def is_nested(self) -> bool:
        return self._parent is not None and self._parent_key is not None

    def string(self, key: str) -> StringSchemaBuilder:
        return StringSchemaBuilder(self, key)

    def number(self, key: str) -> NumberSchemaBuilder:
        return NumberSchemaBuilder(self, key)

    def boolean(self, key: str) -> BooleanSchemaBuilder:
        return BooleanSchemaBuilder(self, key)

    def object(self, key: str, define: Callable[["SchemaBuilder"], Any]) -> "SchemaBuilder":
        """Define a nested object under *key* by running *define* on a fresh builder."""
        self._discard(key)
        nested = SchemaBuilder(self, key)
        define(nested)
        self._place(key, nested.build()[key])
        return self

    def array(
        self,
        key: str,
        item_schema: Union[SchemaNode, SchemaDefinition, Mapping[str, Any]],
    ) -> "SchemaBuilder":
        """Declare an array under *key* whose elements follow *item_schema*.

        *item_schema* may be a node, a definition, or a raw node mapping such
        as ``{"kind": "string"}``.
        """
        self._discard(key)
        self._place(key, ArrayNode(items=coerce_item_schema(item_schema)))
        return self

    def add_to_schema(self, key: str, value: Union[SchemaNode, SchemaDefinition]) -> None:
        """Insert or overwrite *key* in the local mapping."""
        self._release(key)
        self._schema[key] = value

    def build(self) -> SchemaDefinition:
        """Return the finished tree.

        A nested builder returns ``{parent_key: mapping}``, the fragment its
        parent expects; a root builder returns its mapping directly.
        """
        if self.is_nested:
            return {self._parent_key: self._schema}
        return self._schema

    def _place(self, key: str, entry: Union[SchemaNode, SchemaDefinition]) -> None:
        if self.is_nested:
            logger.debug(
                "Writing %r through to parent under %r", key, self._parent_key
            )
            self._parent._write_through(self._parent_key, {key: entry})
        else:
            self._fold(key, entry)

    def _fold(self, key: str, value: Union[SchemaNode, SchemaDefinition]) -> None:
        logger.debug("Folding subtree into %r", key)
        self._schema[key] = _merge(self._schema.get(key), value)

    def _write_through(self, key: str, fragment: SchemaDefinition) -> None:
        """Accept a fragment a nested builder placed under *key*."""
        self._fold(key, fragment)

    def _forget(self, key: str, child_key: str) -> None:
        """Drop *child_key* from the fragment written through under *key*."""
        slot = self._schema.get(key)
        if is_definition(slot):
            slot.pop(child_key, None)

    def _release(self, key: str) -> None:
        # An earlier object()/array() may have written *key* through to the parent.
        if self.is_nested:
            self._parent._forget(self._parent_key, key)

    def _discard(self, key: str) -> None:
        # Re-declaring a key replaces whatever an earlier declaration placed,
        # both locally and in the write-through slot held by the parent.
        self._schema.pop(key, None)
        self._release(key)


def create_schema_builder() -> SchemaBuilder:
    """Return a fresh root builder; the entry point for constructing a schema."""
    return SchemaBuilder()
