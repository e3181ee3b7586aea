"""Schema tooling: serialization, read-only queries, JSON Schema export."""

from .json_schema import to_json_schema
from .query import env_bindings, iter_fields, required_paths, secret_paths
from .serialize import (
    dump_json,
    load_json,
    node_from_dict,
    node_to_dict,
    schema_from_dict,
    schema_to_dict,
)

__all__ = [
    "to_json_schema",
    "env_bindings",
    "iter_fields",
    "required_paths",
    "secret_paths",
    "dump_json",
    "load_json",
    "node_from_dict",
    "node_to_dict",
    "schema_from_dict",
    "schema_to_dict",
]
