"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: classify every node of an already dereferenced
schema and build the typed node tree the emitter walks.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .classifier import Construct, classify
from .matchers import PRIMITIVE_TYPES
from .nodes import (
    AllOfNode,
    AnyOfNode,
    ArrayNode,
    BooleanNode,
    ConstNode,
    EnumNode,
    MultiTypeNode,
    NotNode,
    ObjectNode,
    OneOfNode,
    PrimitiveNode,
    PropertyDef,
    SchemaNode,
    UnsupportedNode,
)
from .options import TITLE_KEY, extract_options


class SchemaParser:
    """Parses a dereferenced JSON Schema into an AST."""

    def __init__(self, ignore_options: Iterable[str] = ()):
        """
        Initialize the parser.

        Args:
            ignore_options: Keys never forwarded as options, on any node
        """
        self.ignore_options = tuple(ignore_options)

    def parse(self, schema: Any) -> SchemaNode:
        """
        Parse the root of a JSON Schema.

        The root title names the generated declaration, so it is not
        repeated as an option.

        Args:
            schema: The JSON Schema (dict or bool)

        Returns:
            The root SchemaNode
        """
        return self._parse_schema_node(schema, "#", exclude=(TITLE_KEY,))

    def parse_node(self, schema: Any, path: str = "#") -> SchemaNode:
        """Parse a schema node without treating it as the root."""
        return self._parse_schema_node(schema, path)

    def _parse_schema_node(self, schema: Any, path: str, exclude: tuple[str, ...] = ()) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema node
            path: Current path in schema (for error messages)
            exclude: Extra keys kept out of the options

        Returns:
            Appropriate SchemaNode subclass
        """
        construct = classify(schema)
        options = extract_options(schema, exclude + self.ignore_options)
        common = {"source_path": path, "raw": schema, "options": options}

        if construct == Construct.BOOLEAN:
            return BooleanNode(value=schema, source_path=path, raw=schema)

        if construct == Construct.ENUM:
            return self._parse_enum_node(schema, common)

        if construct in (Construct.ANY_OF, Construct.ALL_OF, Construct.ONE_OF):
            return self._parse_composite_node(schema, construct, common)

        if construct == Construct.NOT:
            return NotNode(child=self._parse_schema_node(schema["not"], f"{path}/not"), **common)

        if construct == Construct.ARRAY:
            return self._parse_array_node(schema, common)

        if construct == Construct.MULTI_TYPE:
            return self._parse_multi_type_node(schema, common)

        if construct == Construct.OBJECT:
            return self._parse_object_node(schema, common)

        if construct == Construct.CONST:
            return ConstNode(value=schema["const"], **common)

        if construct == Construct.TYPE_NAME:
            return PrimitiveNode(type_name=schema["type"], **common)

        return UnsupportedNode(reason="no supported construct matched", **common)

    def _parse_enum_node(self, schema: dict[str, Any], common: dict[str, Any]) -> SchemaNode:
        """Parse an enum node."""
        values = schema["enum"]
        if not isinstance(values, list):
            return UnsupportedNode(reason="'enum' must be a list", **common)

        title = schema.get(TITLE_KEY)
        return EnumNode(
            values=values,
            title=title if isinstance(title, str) else None,
            **common,
        )

    def _parse_composite_node(self, schema: dict[str, Any], construct: Construct, common: dict[str, Any]) -> SchemaNode:
        """Parse an anyOf, allOf or oneOf node."""
        keyword = construct.value
        members_schema = schema[keyword]
        if not isinstance(members_schema, list):
            return UnsupportedNode(reason=f"'{keyword}' must be a list", **common)

        path = common["source_path"]
        members = [self._parse_schema_node(member, f"{path}/{keyword}/{i}") for i, member in enumerate(members_schema)]

        if construct == Construct.ANY_OF:
            return AnyOfNode(members=members, **common)
        if construct == Construct.ALL_OF:
            return AllOfNode(members=members, **common)
        return OneOfNode(members=members, **common)

    def _parse_array_node(self, schema: dict[str, Any], common: dict[str, Any]) -> ArrayNode:
        """Parse an array type node. A missing 'items' is reported by the emitter."""
        items_schema = schema.get("items")
        path = common["source_path"]
        items = None

        if isinstance(items_schema, list):
            items = [self._parse_schema_node(item, f"{path}/items/{i}") for i, item in enumerate(items_schema)]
        elif items_schema is not None:
            items = self._parse_schema_node(items_schema, f"{path}/items")

        return ArrayNode(items=items, **common)

    def _parse_multi_type_node(self, schema: dict[str, Any], common: dict[str, Any]) -> SchemaNode:
        """Parse a list of types (e.g., ["string", "null"])."""
        type_names = schema["type"]
        for type_name in type_names:
            if type_name not in PRIMITIVE_TYPES:
                return UnsupportedNode(reason=f"type '{type_name}' is not allowed in a list of types", **common)
        return MultiTypeNode(type_names=list(type_names), **common)

    def _parse_object_node(self, schema: dict[str, Any], common: dict[str, Any]) -> SchemaNode:
        """Parse an object type node."""
        properties_schema = schema.get("properties") or {}
        if not isinstance(properties_schema, dict):
            return UnsupportedNode(reason="'properties' must be an object", **common)

        required = schema.get("required", [])
        if not isinstance(required, list):
            return UnsupportedNode(reason="'required' must be a list", **common)

        path = common["source_path"]
        properties = []
        for prop_name, prop_schema in properties_schema.items():
            prop_node = self._parse_schema_node(prop_schema, f"{path}/properties/{prop_name}")
            properties.append(PropertyDef(name=prop_name, node=prop_node))

        return ObjectNode(properties=properties, required=list(required), **common)
