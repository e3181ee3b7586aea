from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("config-guard")
except PackageNotFoundError:
    # Package not installed (e.g. running from source without pip install)
    __version__ = "0.0.0.dev0"

from config_guard.builder import (
    BooleanSchemaBuilder,
    NumberSchemaBuilder,
    SchemaBuilder,
    StringSchemaBuilder,
    create_schema_builder,
)
from config_guard.domain import (
    ArrayNode,
    BooleanNode,
    ConfigGuardError,
    NumberNode,
    NumericCheck,
    SchemaDefinition,
    SchemaFormatError,
    SchemaNode,
    SchemaTargetError,
    StringNode,
)

__all__ = [
    "__version__",
    "create_schema_builder",
    "SchemaBuilder",
    "StringSchemaBuilder",
    "NumberSchemaBuilder",
    "BooleanSchemaBuilder",
    "ArrayNode",
    "BooleanNode",
    "NumberNode",
    "NumericCheck",
    "SchemaDefinition",
    "SchemaNode",
    "StringNode",
    "ConfigGuardError",
    "SchemaFormatError",
    "SchemaTargetError",
]

import logging

# Library package: attach a NullHandler so that logging calls inside
# config_guard are silently discarded unless the application (CLI, test
# harness) configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())
