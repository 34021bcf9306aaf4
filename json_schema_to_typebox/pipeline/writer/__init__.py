"""
Writer module.

Atomic output file writes with validation of the generated code.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, check_balanced

__all__ = [
    "AtomicWriter",
    "check_balanced",
]
