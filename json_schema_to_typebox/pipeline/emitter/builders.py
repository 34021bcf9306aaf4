"""
Builders for TypeBox expression fragments.

One small function per construct. Every fragment returned is a complete
expression with balanced delimiters so callers can nest it verbatim.
"""

from __future__ import annotations

from typing import Any

from ...utils import quote_property_name, to_literal
from ..schema_ast.options import format_options

# Kind under which the oneOf extension is registered in the TypeRegistry
ONE_OF_KIND = "ExtendedOneOf"

# Name of the generated constructor for the oneOf extension
ONE_OF_FUNCTION = "OneOf"

PRIMITIVE_CONSTRUCTORS = {
    "string": "String",
    "number": "Number",
    "integer": "Number",
    "boolean": "Boolean",
    "null": "Null",
}


def call(function: str, *args: str, options: dict[str, Any] | None = None) -> str:
    """Build `function(arg, ..., options)`; the options argument is left out when empty."""
    arguments = list(args)
    if options:
        arguments.append(format_options(options))
    return f"{function}({', '.join(arguments)})"


def type_call(constructor: str, *args: str, options: dict[str, Any] | None = None) -> str:
    return call(f"Type.{constructor}", *args, options=options)


def list_literal(fragments: list[str]) -> str:
    return "[" + ", ".join(fragments) + "]"


def object_type(entries: list[tuple[str, str]], options: dict[str, Any] | None = None) -> str:
    """
    Build a `Type.Object({...})` expression.

    Args:
        entries: (property name, fragment) pairs in schema order
        options: Schema options of the object
    """
    body = ",\n".join(f"{quote_property_name(name)}: {fragment}" for name, fragment in entries)
    return type_call("Object", "{\n" + body + "\n}", options=options)


def optional(fragment: str) -> str:
    return type_call("Optional", fragment)


def unknown(options: dict[str, Any] | None = None) -> str:
    return type_call("Unknown", options=options)


def never(options: dict[str, Any] | None = None) -> str:
    return type_call("Never", options=options)


def literal(value: Any, options: dict[str, Any] | None = None) -> str:
    """Build a literal; null has its own constructor."""
    if value is None:
        return type_call("Null", options=options)
    return type_call("Literal", to_literal(value), options=options)


def union(fragments: list[str], options: dict[str, Any] | None = None) -> str:
    return type_call("Union", list_literal(fragments), options=options)


def intersect(fragments: list[str], options: dict[str, Any] | None = None) -> str:
    return type_call("Intersect", list_literal(fragments), options=options)


def one_of(fragments: list[str], options: dict[str, Any] | None = None) -> str:
    return call(ONE_OF_FUNCTION, list_literal(fragments), options=options)


def negation(fragment: str, options: dict[str, Any] | None = None) -> str:
    return type_call("Not", fragment, options=options)


def array(items: str, options: dict[str, Any] | None = None) -> str:
    return type_call("Array", items, options=options)


def enum_reference(enum_name: str, options: dict[str, Any] | None = None) -> str:
    return type_call("Enum", enum_name, options=options)


def primitive(type_name: str, options: dict[str, Any] | None = None, integer_as_integer: bool = False) -> str:
    """
    Build the constructor call for a primitive type name.

    Args:
        type_name: One of string, number, integer, boolean, null
        options: Schema options
        integer_as_integer: Map "integer" to Type.Integer instead of Type.Number
    """
    if type_name == "integer" and integer_as_integer:
        return type_call("Integer", options=options)
    return type_call(PRIMITIVE_CONSTRUCTORS[type_name], options=options)
