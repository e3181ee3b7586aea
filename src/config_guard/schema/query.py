"""Read-only queries over a finished schema tree."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from config_guard.domain import SchemaDefinition, SchemaNode, StringNode, is_definition, is_node


def iter_fields(
    definition: SchemaDefinition,
    prefix: Tuple[str, ...] = (),
) -> Iterator[Tuple[Tuple[str, ...], SchemaNode]]:
    """Yield ``(path, node)`` for every leaf, depth-first in insertion order.

    Array nodes are yielded as leaves; their ``items`` are not descended into.
    """
    for key, value in definition.items():
        path = prefix + (key,)
        if is_node(value):
            yield path, value
        elif is_definition(value):
            yield from iter_fields(value, path)


def dotted(path: Tuple[str, ...]) -> str:
    return ".".join(path)


def env_bindings(definition: SchemaDefinition) -> Dict[str, str]:
    """Map dotted field path to the environment variable it is bound to."""
    return {
        dotted(path): node.env_binding
        for path, node in iter_fields(definition)
        if node.env_binding is not None
    }


def secret_paths(definition: SchemaDefinition) -> List[str]:
    """Dotted paths of string fields marked secret."""
    return [
        dotted(path)
        for path, node in iter_fields(definition)
        if isinstance(node, StringNode) and node.secret
    ]


def required_paths(definition: SchemaDefinition) -> List[str]:
    return [dotted(path) for path, node in iter_fields(definition) if node.required]
