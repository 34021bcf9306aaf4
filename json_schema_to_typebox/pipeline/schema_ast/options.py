"""
Extraction of schema options.

Schema options are the annotation and constraint keywords of a node
(description, minLength, maximum, ...) that TypeBox accepts as the
trailing `options` argument of a type constructor.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

# Keywords that describe the structure of a schema and are translated
# into code rather than forwarded as options
STRUCTURAL_KEYS = frozenset(
    {
        "type",
        "items",
        "properties",
        "required",
        "anyOf",
        "allOf",
        "oneOf",
        "not",
        "const",
        "enum",
    }
)

# Identifying key that names the root declaration
TITLE_KEY = "title"


def extract_options(node: Any, exclude: Iterable[str] = ()) -> dict[str, Any] | None:
    """
    Collect the non-structural keys of a schema node.

    Args:
        node: The schema node
        exclude: Additional keys to leave out (e.g. the root title)

    Returns:
        The options in schema key order, or None if there are none.
        None means no options argument is emitted at all.
    """
    if not isinstance(node, dict):
        return None
    excluded = STRUCTURAL_KEYS.union(exclude)
    options = {key: value for key, value in node.items() if key not in excluded}
    return options or None


def format_options(options: dict[str, Any] | None) -> str:
    """Serialize options as a compact object literal, or "" for no options."""
    if not options:
        return ""
    return json.dumps(options, ensure_ascii=False, separators=(",", ":"))
