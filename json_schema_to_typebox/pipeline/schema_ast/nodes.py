"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

Each node is one classified construct. The emitter dispatches on the
node class instead of re-inspecting schema keywords.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for error messages)
    source_path: str = ""

    # The schema node as it appeared in the input
    raw: Any = None

    # Non-structural keywords forwarded to the TypeBox constructor (None = no options)
    options: dict[str, Any] | None = None


@dataclass
class BooleanNode(SchemaNode):
    """Represents the trivial `true` (anything) or `false` (nothing) schema."""

    value: bool = True


@dataclass
class EnumNode(SchemaNode):
    """Represents an enum of literal values."""

    values: list[Any] = field(default_factory=list)

    # Own title, used to name generated declarations when there is no property name
    title: str | None = None


@dataclass
class CompositeNode(SchemaNode):
    """Base for constructs combining a list of member schemas."""

    members: list[SchemaNode] = field(default_factory=list)


@dataclass
class AnyOfNode(CompositeNode):
    """Represents anyOf (a union)."""


@dataclass
class AllOfNode(CompositeNode):
    """Represents allOf (an intersection)."""


@dataclass
class OneOfNode(CompositeNode):
    """Represents oneOf (exactly one member matches)."""


@dataclass
class NotNode(SchemaNode):
    """Represents a negated schema."""

    child: SchemaNode | None = None


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | list[SchemaNode] | None = None  # Single type or list of types


@dataclass
class MultiTypeNode(SchemaNode):
    """Represents a list of type names, e.g. ["string", "null"]."""

    type_names: list[str] = field(default_factory=list)


@dataclass
class PropertyDef:
    """Represents a property in an object."""

    name: str = ""
    node: SchemaNode | None = None


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type with properties."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)


@dataclass
class ConstNode(SchemaNode):
    """Represents a const value (a scalar, or a list of scalars)."""

    value: Any = None


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, number, integer, boolean, null)."""

    type_name: str = ""


@dataclass
class UnsupportedNode(SchemaNode):
    """A node that matched no supported construct."""

    reason: str = ""
