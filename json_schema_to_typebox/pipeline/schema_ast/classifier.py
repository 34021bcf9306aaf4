"""
Classification of schema nodes into the constructs the emitter supports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from . import matchers

logger = logging.getLogger(__name__)


class Construct(str, Enum):
    """The closed set of schema shapes recognized by the generator."""

    BOOLEAN = "boolean"
    ENUM = "enum"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    NOT = "not"
    ARRAY = "array"
    MULTI_TYPE = "multiType"
    OBJECT = "object"
    CONST = "const"
    TYPE_NAME = "typeName"
    UNSUPPORTED = "unsupported"


# First match wins. An enum may come without a "type", so it is checked
# before anything that looks at "type".
PRECEDENCE: tuple[tuple[Callable[[Any], bool], Construct], ...] = (
    (matchers.is_boolean_schema, Construct.BOOLEAN),
    (matchers.is_enum_schema, Construct.ENUM),
    (matchers.is_any_of_schema, Construct.ANY_OF),
    (matchers.is_all_of_schema, Construct.ALL_OF),
    (matchers.is_one_of_schema, Construct.ONE_OF),
    (matchers.is_not_schema, Construct.NOT),
    (matchers.is_array_schema, Construct.ARRAY),
    (matchers.is_multiple_types_schema, Construct.MULTI_TYPE),
    (matchers.is_object_schema, Construct.OBJECT),
    (matchers.is_const_schema, Construct.CONST),
    (matchers.is_type_name_schema, Construct.TYPE_NAME),
)


def classify(node: Any) -> Construct:
    """Return the construct a schema node represents.

    Never raises: nodes that match nothing are classified as UNSUPPORTED
    and reported later by the emitter.
    """
    for predicate, construct in PRECEDENCE:
        if predicate(node):
            return construct
    logger.debug("No construct matched schema node: %r", node)
    return Construct.UNSUPPORTED
