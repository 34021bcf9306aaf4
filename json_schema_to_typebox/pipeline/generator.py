"""
Pipeline generator.

Runs the conversion phases in order:

1. Analyzer: dereference every $ref into one self-contained schema
2. Parser: build the schema AST
3. Emitter: produce TypeBox code and assemble the module
4. Formatter: optional prettier pass
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..errors import SchemaParseError
from .analyzer import ReferenceResolver
from .config import CodeGeneratorConfig
from .emitter import AuxiliaryDeclarations, ProgramAssembler, TypeBoxEmitter
from .formatters import PrettierFormatter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """
    TypeBox code generator for JSON Schema documents.

    Usage:
        generator = PipelineGenerator(schema, config)
        code = generator.generate()
    """

    def __init__(
        self,
        schema: Any,
        config: CodeGeneratorConfig | None = None,
        base_uri: str | None = None,
        generation_comment: str = "",
    ):
        """
        Initialize the generator.

        Args:
            schema: The JSON schema (a dict or a boolean)
            config: Code generation configuration
            base_uri: URI relative $refs are resolved against
                (defaults to the current working directory)
            generation_comment: Comment placed at the top of the generated file
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.base_uri = base_uri
        self.generation_comment = generation_comment

    def generate(self) -> str:
        """
        Generate TypeScript code from the schema.

        Returns:
            The generated source

        Raises:
            ReferenceResolutionError: If a $ref cannot be resolved
            UnsupportedConstructError: If the schema uses an unsupported construct
            MissingStructuralKeyError: If a node lacks a key its construct needs
        """
        resolved = ReferenceResolver(self.base_uri).dereference(self.schema)

        assembler = ProgramAssembler(self.config, self.generation_comment)
        code = assembler.assemble(resolved)

        if self.config.formatter.enabled:
            code = PrettierFormatter(self.config.formatter.command).format(code, self.config.formatter)

        return code


def load_schema(text: str) -> Any:
    """Parse schema text, raising SchemaParseError on invalid JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Input is not valid JSON: {e}") from e


def schema2typebox(input: str, config: CodeGeneratorConfig | None = None, base_uri: str | None = None) -> str:
    """
    Convert JSON Schema text into a TypeScript module of TypeBox code.

    Args:
        input: The schema as JSON text
        config: Code generation configuration
        base_uri: URI relative $refs are resolved against

    Returns:
        The generated source
    """
    schema = load_schema(input)
    logger.debug("Converting schema of type %s", type(schema).__name__)
    return PipelineGenerator(schema, config, base_uri).generate()


def collect(schema: Any, config: CodeGeneratorConfig | None = None) -> str:
    """
    Emit the TypeBox fragment for an already dereferenced schema.

    Auxiliary declarations go to a throw-away collector and are not part
    of the result.
    """
    emitter = TypeBoxEmitter(config, AuxiliaryDeclarations())
    return emitter.emit_schema(schema)
