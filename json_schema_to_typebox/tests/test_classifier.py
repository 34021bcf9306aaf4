"""
Tests for schema classification and its precedence order.
"""

from __future__ import annotations

import pytest

from json_schema_to_typebox.pipeline.schema_ast import Construct, classify


@pytest.mark.parametrize(
    "schema, expected",
    [
        (True, Construct.BOOLEAN),
        (False, Construct.BOOLEAN),
        ({"enum": ["a", "b"]}, Construct.ENUM),
        ({"anyOf": [{"type": "string"}]}, Construct.ANY_OF),
        ({"allOf": [{"type": "string"}]}, Construct.ALL_OF),
        ({"oneOf": [{"type": "string"}]}, Construct.ONE_OF),
        ({"not": {"type": "string"}}, Construct.NOT),
        ({"type": "array", "items": {"type": "string"}}, Construct.ARRAY),
        ({"type": ["string", "null"]}, Construct.MULTI_TYPE),
        ({"type": "object"}, Construct.OBJECT),
        ({"properties": {"a": {"type": "string"}}}, Construct.OBJECT),
        ({"const": "x"}, Construct.CONST),
        ({"type": "string"}, Construct.TYPE_NAME),
        ({"type": "integer"}, Construct.TYPE_NAME),
        ({"type": "null"}, Construct.TYPE_NAME),
    ],
)
def test_classify_single_construct(schema, expected):
    assert classify(schema) == expected


@pytest.mark.parametrize(
    "schema, expected",
    [
        # enum wins over the declared type
        ({"type": "string", "enum": ["a"]}, Construct.ENUM),
        # enum wins over the combinators
        ({"enum": ["a"], "anyOf": [{"type": "string"}]}, Construct.ENUM),
        ({"anyOf": [], "allOf": [], "oneOf": []}, Construct.ANY_OF),
        ({"allOf": [], "oneOf": []}, Construct.ALL_OF),
        ({"oneOf": [], "not": {}}, Construct.ONE_OF),
        ({"not": {}, "type": "array"}, Construct.NOT),
        ({"anyOf": [], "type": "object", "properties": {}}, Construct.ANY_OF),
        ({"type": "object", "const": {}}, Construct.OBJECT),
        ({"type": "string", "const": "x"}, Construct.CONST),
    ],
)
def test_classify_precedence(schema, expected):
    assert classify(schema) == expected


@pytest.mark.parametrize(
    "schema",
    [
        {},
        {"description": "nothing structural"},
        {"type": "foo"},
        {"$ref": "#/definitions/a"},
        "string",
        42,
        None,
    ],
)
def test_classify_unsupported(schema):
    assert classify(schema) == Construct.UNSUPPORTED


def test_classify_typed_node_with_properties_is_not_forced_to_object():
    assert classify({"type": "string", "properties": {"a": {}}}) == Construct.TYPE_NAME
