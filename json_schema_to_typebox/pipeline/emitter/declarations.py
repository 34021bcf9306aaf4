"""
Collector for auxiliary declarations.

Side declarations (generated enums, union constants and the oneOf
extension) are discovered while emitting and placed before the main
declaration. One collector belongs to exactly one conversion.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Symbols every generated file imports from "@sinclair/typebox"
BASE_IMPORTS = ("Static", "Type")


class AuxiliaryDeclarations:
    """Accumulates auxiliary declarations and the imports they need."""

    def __init__(self):
        self._declarations: dict[str, str] = {}
        self._typebox_imports: set[str] = set(BASE_IMPORTS)
        self._value_imports: set[str] = set()

    def add(self, name: str, code: str) -> None:
        """Register a declaration. Re-registering a name replaces its code but keeps its position."""
        if name in self._declarations:
            logger.debug("Replacing auxiliary declaration %s", name)
        else:
            logger.debug("Adding auxiliary declaration %s", name)
        self._declarations[name] = code

    def add_once(self, name: str, code: str) -> bool:
        """Register a declaration unless one with that name exists. Returns True if added."""
        if name in self._declarations:
            return False
        self.add(name, code)
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)

    def require_imports(self, *symbols: str) -> None:
        """Mark symbols of "@sinclair/typebox" as used."""
        self._typebox_imports.update(symbols)

    def require_value_imports(self, *symbols: str) -> None:
        """Mark symbols of "@sinclair/typebox/value" as used."""
        self._value_imports.update(symbols)

    @property
    def declarations(self) -> list[str]:
        """Declaration code in the order first registered."""
        return list(self._declarations.values())

    @property
    def names(self) -> list[str]:
        return list(self._declarations)

    @property
    def typebox_imports(self) -> list[str]:
        return sorted(self._typebox_imports)

    @property
    def value_imports(self) -> list[str]:
        return sorted(self._value_imports)

    def reset(self) -> None:
        """Forget everything collected so far."""
        self._declarations = {}
        self._typebox_imports = set(BASE_IMPORTS)
        self._value_imports = set()
