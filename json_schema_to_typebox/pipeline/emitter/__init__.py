"""
Emitter module.

Turns the schema AST into TypeBox code: fragment builders, the
recursive emitter, the auxiliary declaration collector and the
program assembler.
"""

from __future__ import annotations

from .assembler import ProgramAssembler
from .declarations import AuxiliaryDeclarations
from .templates import TemplateRenderer
from .typebox_emitter import TypeBoxEmitter

__all__ = [
    "AuxiliaryDeclarations",
    "ProgramAssembler",
    "TemplateRenderer",
    "TypeBoxEmitter",
]
