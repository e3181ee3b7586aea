"""Fluent schema builders."""

from .fields import BooleanSchemaBuilder, FieldBuilder, NumberSchemaBuilder, StringSchemaBuilder
from .schema_builder import SchemaBuilder, create_schema_builder

__all__ = [
    "BooleanSchemaBuilder",
    "FieldBuilder",
    "NumberSchemaBuilder",
    "SchemaBuilder",
    "StringSchemaBuilder",
    "create_schema_builder",
]
