"""
Name resolver for generated TypeScript identifiers.

Derives the name of the exported value/type pair and the names of
auxiliary declarations (generated enums and unions).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ...errors import NamingError
from ...utils import capitalize, to_identifier
from ..schema_ast.options import TITLE_KEY


class AuxiliaryKind(str, Enum):
    """Kinds of auxiliary declarations; the value is the name suffix."""

    ENUM = "Enum"
    UNION = "Union"


class NameResolver:
    """Resolves identifiers for generated declarations."""

    # Name used when the schema has no title
    DEFAULT_NAME = "T"

    def top_level_name(self, schema: Any) -> str:
        """
        Name of the exported value, taken from the root title.

        Args:
            schema: The root schema (dict or bool)

        Returns:
            The title made a valid identifier, or DEFAULT_NAME for boolean
            or untitled schemas
        """
        if not isinstance(schema, dict):
            return self.DEFAULT_NAME
        title = schema.get(TITLE_KEY)
        if not isinstance(title, str) or not title:
            return self.DEFAULT_NAME
        return to_identifier(title)

    def type_alias_name(self, value_name: str) -> str:
        """Name of the `Static<typeof ...>` type alias paired with a value."""
        if not value_name:
            raise NamingError(f"Can't generate type for empty string. Got input: {value_name!r}")
        return capitalize(value_name)

    def auxiliary_name(self, property_name: str, kind: AuxiliaryKind) -> str:
        """
        Name of a generated enum or union declaration.

        Examples:
            ("status", ENUM) -> "StatusEnum"
            ("status", UNION) -> "StatusUnion"
            ("first-name", ENUM) -> "First_nameEnum"
        """
        return capitalize(to_identifier(property_name)) + kind.value
