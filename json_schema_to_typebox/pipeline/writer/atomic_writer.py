"""
Atomic file writer for generated code.

Ensures that an interrupted or failed generation never leaves a partial
output file behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ...errors import OutputValidationError

logger = logging.getLogger(__name__)

_CLOSING = {")": "(", "]": "[", "}": "{"}
_QUOTES = ('"', "'", "`")


def check_balanced(code: str) -> None:
    """
    Check that brackets, parentheses and braces are balanced.

    String literals and comments are skipped.

    Raises:
        OutputValidationError: On the first unbalanced delimiter
    """
    stack: list[str] = []
    i = 0
    length = len(code)
    while i < length:
        char = code[i]
        if char in _QUOTES:
            i += 1
            while i < length and code[i] != char:
                if code[i] == "\\":
                    i += 1
                i += 1
        elif code.startswith("//", i):
            newline = code.find("\n", i)
            i = length if newline == -1 else newline
        elif code.startswith("/*", i):
            end = code.find("*/", i + 2)
            i = length if end == -1 else end + 1
        elif char in "([{":
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                raise OutputValidationError(f"Generated code has an unbalanced '{char}' at offset {i}")
        i += 1
    if stack:
        raise OutputValidationError(f"Generated code has {len(stack)} unclosed delimiter(s)")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the generated code
        """
        self._validate = validate or check_balanced

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)
            logger.debug("Wrote %s", path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
            OutputValidationError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
