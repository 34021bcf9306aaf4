"""
Analyzer module.

Contains reference resolution and name resolution.
"""

from __future__ import annotations

from .name_resolver import AuxiliaryKind, NameResolver
from .reference_resolver import ReferenceResolver, base_uri_for

__all__ = [
    "AuxiliaryKind",
    "NameResolver",
    "ReferenceResolver",
    "base_uri_for",
]
