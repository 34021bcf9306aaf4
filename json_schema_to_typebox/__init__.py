"""JSON Schema to TypeBox

Generates TypeBox (@sinclair/typebox) TypeScript code from JSON Schema
documents, with $ref resolution, configurable enum generation and an
optional prettier pass.
"""

__version__ = "1.0.0"

from .errors import (
    MissingStructuralKeyError,
    NamingError,
    OutputValidationError,
    ReferenceResolutionError,
    SchemaConversionError,
    SchemaParseError,
    UnsupportedConstructError,
)
from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    EnumMode,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    collect,
    schema2typebox,
)

__all__ = [
    "schema2typebox",
    "collect",
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "EnumMode",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "SchemaConversionError",
    "SchemaParseError",
    "UnsupportedConstructError",
    "MissingStructuralKeyError",
    "NamingError",
    "ReferenceResolutionError",
    "OutputValidationError",
]
