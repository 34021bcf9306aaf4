"""
Utility functions for JSON Schema to TypeBox generator.
"""

import json
import re
from typing import Any

from .errors import NamingError

# Identifiers that can be used as unquoted object keys in TypeScript
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Characters that cannot appear in an identifier
_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def capitalize(name: str) -> str:
    """Capitalize the first letter of a name, leaving the rest untouched.

    Examples:
        "status" -> "Status"
        "optionalStatus" -> "OptionalStatus"

    Raises:
        NamingError: If name is empty
    """
    if not name:
        raise NamingError("Unexpected input when capitalizing. Did not expect empty string.")
    return name[0].upper() + name[1:]


def to_identifier(name: str) -> str:
    """Turn arbitrary text into a TypeScript identifier.

    Examples:
        "My Schema" -> "My_Schema"
        "first-name" -> "first_name"
        "2d" -> "_2d"

    Raises:
        NamingError: If name is empty
    """
    if not name:
        raise NamingError("Cannot build an identifier from an empty string.")
    identifier = _NON_IDENTIFIER_CHARS.sub("_", name)
    if identifier[0].isdigit():
        identifier = "_" + identifier
    return identifier


def is_identifier(text: str) -> bool:
    return bool(_IDENTIFIER_PATTERN.match(text))


def quote_property_name(name: str) -> str:
    """Return the property name as it must appear as a TypeScript object key."""
    if is_identifier(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def to_literal(value: Any) -> str:
    """Render a JSON value as TypeScript literal source (strings quoted, numbers bare)."""
    return json.dumps(value, ensure_ascii=False)


def to_enum_member_name(value: Any) -> str:
    """Derive a TypeScript enum member name from an enum value.

    Examples:
        "accepted" -> "ACCEPTED"
        "in-progress" -> "IN_PROGRESS"
        1 -> "_1"
    """
    if isinstance(value, str):
        name = _NON_IDENTIFIER_CHARS.sub("_", value.upper())
        if not name:
            return "_"
        if name[0].isdigit():
            return "_" + name
        return name
    return "_" + _NON_IDENTIFIER_CHARS.sub("_", to_literal(value))
