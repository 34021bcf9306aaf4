"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

from ..config import FormatterConfig
from .base import Formatter


class PrettierFormatter(Formatter):
    """Formatter piping TypeScript code through prettier."""

    def __init__(self, command: list[str] | None = None):
        super().__init__(command or ["prettier"])

    def build_command(self, config: FormatterConfig) -> list[str]:
        cmd = [*self.command, "--parser", "typescript"]
        if config.line_length:
            cmd.extend(["--print-width", str(config.line_length)])
        if config.single_quote:
            cmd.append("--single-quote")
        return cmd


def format_with_prettier(code: str, line_length: int = 80, single_quote: bool = False) -> str:
    """
    Convenience function to format TypeScript code with prettier.

    Args:
        code: TypeScript source code
        line_length: Maximum line length
        single_quote: Prefer single quotes

    Returns:
        Formatted code
    """
    config = FormatterConfig(enabled=True, line_length=line_length, single_quote=single_quote)
    return PrettierFormatter(config.command).format(code, config)
