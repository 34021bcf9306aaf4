"""
Pipeline - JSON Schema to TypeBox code generator.

The conversion runs in phases:

1. Phase 1 (Analyzer): Dereference $refs into a self-contained schema
2. Phase 2 (Parser): Classify nodes and build the Schema AST
3. Phase 3 (Emitter): Emit TypeBox fragments and collect side declarations
4. Phase 4 (Assembler): Render imports, declarations and the main type
5. Phase 5 (Formatter): Optional post-processing with prettier
6. Phase 6 (Writer): Atomic write of the output file
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, EnumMode, FormatterConfig, OutputConfig, OutputMode
from .generator import PipelineGenerator, collect, load_schema, schema2typebox
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "EnumMode",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "collect",
    "load_schema",
    "schema2typebox",
]
