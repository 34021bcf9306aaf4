"""
Exceptions raised while converting a JSON Schema to TypeBox code.

Every error aborts the whole conversion; nothing is recovered locally.
"""

from __future__ import annotations

import json
from typing import Any


def _serialize(node: Any) -> str:
    try:
        return json.dumps(node, ensure_ascii=False, sort_keys=False)
    except (TypeError, ValueError):
        return repr(node)


class SchemaConversionError(Exception):
    """Base class for all conversion failures."""

    pass


class UnsupportedConstructError(SchemaConversionError):
    """Raised when a schema node matches none of the supported constructs."""

    def __init__(self, node: Any, reason: str = ""):
        self.node = node
        message = f"Unsupported schema: {_serialize(node)}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingStructuralKeyError(SchemaConversionError):
    """Raised when a node lacks a key its construct requires (e.g. 'items' on an array)."""

    def __init__(self, node: Any, key: str):
        self.node = node
        self.key = key
        super().__init__(f"Expected schema to have '{key}'. Got: {_serialize(node)}")


class NamingError(SchemaConversionError):
    """Raised when an identifier cannot be derived from a name."""

    pass


class ReferenceResolutionError(SchemaConversionError):
    """Raised when a $ref cannot be fetched, parsed or followed."""

    def __init__(self, ref: str, reason: str):
        self.ref = ref
        self.reason = reason
        super().__init__(f"Could not resolve $ref '{ref}': {reason}")


class SchemaParseError(SchemaConversionError):
    """Raised when the input text is not valid JSON."""

    pass


class OutputValidationError(SchemaConversionError):
    """Raised when generated code fails validation before being written."""

    pass
