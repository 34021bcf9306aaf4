"""
Predicates for recognizing JSON Schema constructs.

Each predicate looks at a single schema node (a dict or a bool) and
answers whether the node carries the keyword(s) of one construct.
They are not mutually exclusive on their own; the classifier applies
them in a fixed order.
"""

from __future__ import annotations

from typing import Any

# Type names that map directly to a TypeBox constructor
PRIMITIVE_TYPES = ("string", "number", "integer", "boolean", "null")


def is_boolean_schema(node: Any) -> bool:
    return isinstance(node, bool)


def is_enum_schema(node: Any) -> bool:
    return isinstance(node, dict) and "enum" in node


def is_any_of_schema(node: Any) -> bool:
    return isinstance(node, dict) and "anyOf" in node


def is_all_of_schema(node: Any) -> bool:
    return isinstance(node, dict) and "allOf" in node


def is_one_of_schema(node: Any) -> bool:
    return isinstance(node, dict) and "oneOf" in node


def is_not_schema(node: Any) -> bool:
    return isinstance(node, dict) and "not" in node


def is_array_schema(node: Any) -> bool:
    return isinstance(node, dict) and node.get("type") == "array"


def is_multiple_types_schema(node: Any) -> bool:
    return isinstance(node, dict) and isinstance(node.get("type"), list)


def is_object_schema(node: Any) -> bool:
    """Objects are typed "object", or untyped nodes that declare properties."""
    if not isinstance(node, dict):
        return False
    if node.get("type") == "object":
        return True
    return "type" not in node and "properties" in node


def is_const_schema(node: Any) -> bool:
    return isinstance(node, dict) and "const" in node


def is_type_name_schema(node: Any) -> bool:
    return isinstance(node, dict) and node.get("type") in PRIMITIVE_TYPES
