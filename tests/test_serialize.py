"""Tests for schema/serialize.py: dict and JSON encoding of schema trees."""
from __future__ import annotations

import json

import pytest

from config_guard import create_schema_builder
from config_guard.domain import (
    ArrayNode,
    BooleanNode,
    NumberNode,
    NumericCheck,
    SchemaFormatError,
    StringNode,
)
from config_guard.schema import (
    dump_json,
    load_json,
    node_from_dict,
    node_to_dict,
    schema_from_dict,
    schema_to_dict,
)


def _sample():
    return (
        create_schema_builder()
        .string("host").env("DB_HOST").default("localhost").required().end()
        .number("port").min(1).max(65535).integer().end()
        .boolean("debug").default(False).end()
        .object("auth", lambda b: b.string("token").secret().end())
        .array("tags", {"kind": "string"})
        .build()
    )


def test_array_of_strings_encodes_minimal_mapping():
    schema = create_schema_builder().array("tags", StringNode()).build()
    assert schema_to_dict(schema) == {"tags": {"kind": "array", "items": {"kind": "string"}}}


def test_required_string_encodes_only_set_fields():
    assert node_to_dict(StringNode(required=True)) == {"kind": "string", "required": True}


def test_sample_encoding():
    assert schema_to_dict(_sample()) == {
        "host": {
            "kind": "string",
            "required": True,
            "default": "localhost",
            "env_binding": "DB_HOST",
        },
        "port": {"kind": "number", "min": 1, "max": 65535, "checks": ["integer"]},
        "debug": {"kind": "boolean", "default": False},
        "auth": {"token": {"kind": "string", "secret": True}},
        "tags": {"kind": "array", "items": {"kind": "string"}},
    }


def test_zero_and_false_defaults_are_kept():
    assert node_to_dict(NumberNode(default=0)) == {"kind": "number", "default": 0}
    assert node_to_dict(BooleanNode(default=False)) == {"kind": "boolean", "default": False}


def test_decode_restores_nodes():
    schema = _sample()
    assert schema_from_dict(schema_to_dict(schema)) == schema


def test_json_text_is_plain_json():
    text = dump_json(_sample(), indent=0)
    data = json.loads(text)
    assert data["port"]["checks"] == ["integer"]
    assert load_json(text) == _sample()


def test_node_from_dict_decodes_checks_and_items():
    node = node_from_dict({
        "kind": "array",
        "items": {"kind": "number", "checks": ["positive"]},
    })
    assert node == ArrayNode(items=NumberNode(checks=[NumericCheck.POSITIVE]))


def test_array_of_objects_decodes_definition_items():
    node = node_from_dict({"kind": "array", "items": {"name": {"kind": "string"}}})
    assert node.items == {"name": StringNode()}


def test_field_named_kind_inside_definition():
    data = {"kind": {"kind": "string", "enum": ["a", "b"]}}
    assert schema_from_dict(data) == {"kind": StringNode(enum=["a", "b"])}


def test_unknown_kind_raises():
    with pytest.raises(SchemaFormatError, match="Unknown node kind 'date'"):
        schema_from_dict({"when": {"kind": "date"}})


def test_unknown_field_raises():
    with pytest.raises(SchemaFormatError, match="pattern"):
        schema_from_dict({"n": {"kind": "number", "pattern": "x"}})


def test_bad_check_raises():
    with pytest.raises(SchemaFormatError, match="Invalid numeric check"):
        node_from_dict({"kind": "number", "checks": ["even"]})


def test_non_mapping_value_raises():
    with pytest.raises(SchemaFormatError, match="'a.b'"):
        schema_from_dict({"a": {"b": 5}})


def test_non_mapping_root_raises():
    with pytest.raises(SchemaFormatError):
        schema_from_dict(["not", "a", "schema"])


def test_invalid_json_raises():
    with pytest.raises(SchemaFormatError, match="not valid JSON"):
        load_json("{nope")


def test_redact_secrets_masks_secret_defaults():
    schema = (
        create_schema_builder()
        .string("password").secret().default("hunter2").end()
        .object("db", lambda b: b.string("token").secret().default("t0k3n").end())
        .string("user").default("admin").end()
        .build()
    )
    data = schema_to_dict(schema, redact_secrets=True)
    assert data["password"] == {"kind": "string", "default": "***", "secret": True}
    assert data["db"]["token"]["default"] == "***"
    assert data["user"]["default"] == "admin"
    assert "hunter2" not in dump_json(schema, redact_secrets=True)
    # Without redaction the tree round-trips unchanged.
    assert schema_to_dict(schema)["password"]["default"] == "hunter2"


def test_redact_secrets_inside_array_items():
    item = create_schema_builder().string("key").secret().default("s3cret").end().build()
    schema = create_schema_builder().array("keys", item).build()
    assert "s3cret" not in dump_json(schema, redact_secrets=True)
