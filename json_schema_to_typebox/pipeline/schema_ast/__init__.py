"""
Schema AST (Abstract Syntax Tree) module.

Contains the construct classifier, option extraction, the AST node
definitions and the parser for JSON Schema.
"""

from __future__ import annotations

from .classifier import Construct, classify
from .nodes import (
    AllOfNode,
    AnyOfNode,
    ArrayNode,
    BooleanNode,
    CompositeNode,
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
from .options import STRUCTURAL_KEYS, extract_options, format_options
from .parser import SchemaParser

__all__ = [
    "Construct",
    "classify",
    "STRUCTURAL_KEYS",
    "extract_options",
    "format_options",
    "SchemaNode",
    "BooleanNode",
    "EnumNode",
    "CompositeNode",
    "AnyOfNode",
    "AllOfNode",
    "OneOfNode",
    "NotNode",
    "ArrayNode",
    "MultiTypeNode",
    "PropertyDef",
    "ObjectNode",
    "ConstNode",
    "PrimitiveNode",
    "UnsupportedNode",
    "SchemaParser",
]
