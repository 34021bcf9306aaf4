"""
TypeBox emission engine.

Walks the schema AST and builds the TypeBox expression for every node.
Side declarations found on the way (generated enums, unions, the oneOf
extension) go to the AuxiliaryDeclarations of the current conversion.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from ...errors import MissingStructuralKeyError, UnsupportedConstructError
from ...utils import to_enum_member_name, to_literal
from ..analyzer.name_resolver import AuxiliaryKind, NameResolver
from ..config import CodeGeneratorConfig, EnumMode
from ..schema_ast.nodes import (
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
    SchemaNode,
    UnsupportedNode,
)
from ..schema_ast.parser import SchemaParser
from . import builders
from .declarations import AuxiliaryDeclarations
from .templates import TemplateRenderer

# Imports needed by the oneOf extension
ONE_OF_TYPEBOX_IMPORTS = ("Kind", "SchemaOptions", "Static", "TSchema", "TUnion", "Type", "TypeRegistry")
ONE_OF_VALUE_IMPORTS = ("Value",)


def _is_literal(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _is_enum_member_value(value: Any) -> bool:
    """TypeScript enums only hold string and number members."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


class TypeBoxEmitter:
    """Emits TypeBox code fragments for schema AST nodes."""

    def __init__(
        self,
        config: CodeGeneratorConfig | None = None,
        declarations: AuxiliaryDeclarations | None = None,
        names: NameResolver | None = None,
        templates: TemplateRenderer | None = None,
    ):
        """
        Initialize the emitter.

        Args:
            config: Code generation configuration
            declarations: Collector for side declarations of this conversion
            names: Resolver for generated identifiers
            templates: Renderer for declaration templates
        """
        self.config = config or CodeGeneratorConfig()
        self.declarations = declarations if declarations is not None else AuxiliaryDeclarations()
        self.names = names or NameResolver()
        self.templates = templates or TemplateRenderer()

    def emit_schema(self, schema: Any) -> str:
        """Parse a dereferenced schema and emit its fragment."""
        root = SchemaParser(self.config.ignore_options).parse_node(schema)
        return self.emit(root)

    def emit(self, node: SchemaNode, required: Collection[str] = (), property_name: str | None = None) -> str:
        """
        Emit the TypeBox expression for a node.

        Args:
            node: The schema node
            required: Required property names of the enclosing object
            property_name: Name of the property this node describes, if any

        Returns:
            The TypeBox expression

        Raises:
            UnsupportedConstructError: If the node (or a descendant) is not supported
            MissingStructuralKeyError: If a node lacks a key its construct needs
        """
        if isinstance(node, BooleanNode):
            return self._emit_boolean(node)

        if isinstance(node, ObjectNode):
            return self._emit_object(node)

        if isinstance(node, EnumNode):
            return self._emit_enum(node, property_name)

        if isinstance(node, AnyOfNode):
            return builders.union(self._emit_members(node.members), node.options)

        if isinstance(node, AllOfNode):
            return builders.intersect(self._emit_members(node.members), node.options)

        if isinstance(node, OneOfNode):
            return self._emit_one_of(node)

        if isinstance(node, NotNode):
            return builders.negation(self.emit(node.child), node.options)

        if isinstance(node, ArrayNode):
            return self._emit_array(node)

        if isinstance(node, MultiTypeNode):
            return self._emit_multi_type(node)

        if isinstance(node, ConstNode):
            return self._emit_const(node)

        if isinstance(node, PrimitiveNode):
            return builders.primitive(node.type_name, node.options, self.config.integer_as_integer)

        if isinstance(node, UnsupportedNode):
            raise UnsupportedConstructError(node.raw, node.reason)

        raise UnsupportedConstructError(node.raw, f"no emitter for {type(node).__name__}")

    def _emit_members(self, members: list[SchemaNode]) -> list[str]:
        """Emit combinator members as standalone schemas (no property context)."""
        return [self.emit(member) for member in members]

    def _emit_boolean(self, node: BooleanNode) -> str:
        if node.value:
            return builders.unknown(node.options)
        return builders.never(node.options)

    def _emit_object(self, node: ObjectNode) -> str:
        """Emit an object; objects without properties accept anything."""
        if not node.properties:
            return builders.unknown(node.options)

        entries = []
        for prop in node.properties:
            fragment = self.emit(prop.node, node.required, prop.name)
            if prop.name not in node.required:
                fragment = builders.optional(fragment)
            entries.append((prop.name, fragment))
        return builders.object_type(entries, node.options)

    def _literals(self, values: list[Any], node: SchemaNode) -> list[str]:
        for value in values:
            if not _is_literal(value):
                raise UnsupportedConstructError(node.raw, f"literal value must be a string, number, boolean or null, got {to_literal(value)}")
        return [builders.literal(value) for value in values]

    def _emit_const(self, node: ConstNode) -> str:
        if isinstance(node.value, list):
            return builders.union(self._literals(node.value, node), node.options)
        if not _is_literal(node.value):
            raise UnsupportedConstructError(node.raw, "const must be a string, number, boolean, null or a list of those")
        return builders.literal(node.value, node.options)

    def _emit_enum(self, node: EnumNode, property_name: str | None) -> str:
        """
        Emit an enum as a union of literals.

        Outside of the inline mode, a named enum and/or union constant is
        declared and the fragment only references it. Enums are named after
        the property, or after their own title at the root.
        """
        literals = self._literals(node.values, node)
        mode = self.config.enum_mode
        base_name = property_name or node.title

        if mode == EnumMode.INLINE or not base_name:
            return builders.union(literals, node.options)

        enum_possible = bool(node.values) and all(_is_enum_member_value(v) for v in node.values)
        declare_enum = mode.declares_enum and enum_possible
        use_enum = mode.references_enum and enum_possible
        declare_union = mode.declares_union or not use_enum

        enum_name = self.names.auxiliary_name(base_name, AuxiliaryKind.ENUM)
        union_name = self.names.auxiliary_name(base_name, AuxiliaryKind.UNION)

        if declare_enum:
            self.declarations.add(enum_name, self._render_enum(enum_name, node.values))
        if declare_union:
            fragment = builders.union(literals, None if use_enum else node.options)
            self.declarations.add(union_name, self.templates.render("union", name=union_name, fragment=fragment))

        if use_enum:
            return builders.enum_reference(enum_name, node.options)
        return union_name

    def _render_enum(self, name: str, values: list[Any]) -> str:
        members = []
        used: set[str] = set()
        for value in values:
            base = to_enum_member_name(value)
            member = base
            suffix = 2
            while member in used:
                member = f"{base}_{suffix}"
                suffix += 1
            used.add(member)
            members.append((member, to_literal(value)))
        return self.templates.render("enum", name=name, members=members)

    def _emit_one_of(self, node: OneOfNode) -> str:
        """Emit oneOf through the generated OneOf() extension, declared once per conversion."""
        added = self.declarations.add_once(
            builders.ONE_OF_FUNCTION,
            self.templates.render("one_of", kind=builders.ONE_OF_KIND, function_name=builders.ONE_OF_FUNCTION),
        )
        if added:
            self.declarations.require_imports(*ONE_OF_TYPEBOX_IMPORTS)
            self.declarations.require_value_imports(*ONE_OF_VALUE_IMPORTS)
        return builders.one_of(self._emit_members(node.members), node.options)

    def _emit_array(self, node: ArrayNode) -> str:
        if node.items is None:
            raise MissingStructuralKeyError(node.raw, "items")
        if isinstance(node.items, list):
            items = builders.union([self.emit(item) for item in node.items])
        else:
            items = self.emit(node.items)
        return builders.array(items, node.options)

    def _emit_multi_type(self, node: MultiTypeNode) -> str:
        """Emit a list of types as a union; options go on the union only."""
        members = [builders.primitive(type_name, None, self.config.integer_as_integer) for type_name in node.type_names]
        return builders.union(members, node.options)
