"""
Program assembler.

Combines imports, auxiliary declarations and the emitted root
expression into a complete TypeScript module.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.name_resolver import NameResolver
from ..config import CodeGeneratorConfig
from ..schema_ast.parser import SchemaParser
from .declarations import AuxiliaryDeclarations
from .templates import TemplateRenderer
from .typebox_emitter import TypeBoxEmitter


def format_header(header: str) -> str:
    """Turn free-form header text into a comment, unless it already is one."""
    header = header.strip("\n")
    if not header:
        return ""
    if header.lstrip().startswith(("//", "/*")):
        return header
    return "\n".join(f"// {line}".rstrip() for line in header.splitlines())


class ProgramAssembler:
    """Builds the full source text for one dereferenced schema."""

    def __init__(self, config: CodeGeneratorConfig | None = None, generation_comment: str = ""):
        """
        Initialize the assembler.

        Args:
            config: Code generation configuration
            generation_comment: Comment placed at the top of the file
                (only used when config.add_generation_comment is set)
        """
        self.config = config or CodeGeneratorConfig()
        self.generation_comment = generation_comment
        self.names = NameResolver()
        self.templates = TemplateRenderer()

    def assemble(self, schema: Any) -> str:
        """
        Generate the TypeScript module for a schema.

        Args:
            schema: The dereferenced schema

        Returns:
            Imports, auxiliary declarations, the type alias and the value declaration
        """
        # A fresh collector per call: nothing leaks between conversions
        declarations = AuxiliaryDeclarations()

        name = self.names.top_level_name(schema)
        type_name = self.names.type_alias_name(name)

        root = SchemaParser(self.config.ignore_options).parse(schema)
        if self.config.add_root_id and isinstance(schema, dict):
            root.options = {**(root.options or {}), "$id": name}

        emitter = TypeBoxEmitter(self.config, declarations, self.names, self.templates)
        body = emitter.emit(root)

        sections = [
            self.templates.render(
                "prefix",
                generation_comment=self.generation_comment if self.config.add_generation_comment else "",
                header=format_header(self.config.header),
                typebox_imports=declarations.typebox_imports,
                value_imports=declarations.value_imports,
            )
        ]
        sections.extend(declarations.declarations)
        sections.append(self.templates.render("suffix", type_name=type_name, name=name, body=body))
        return "\n\n".join(section.strip("\n") for section in sections) + "\n"
