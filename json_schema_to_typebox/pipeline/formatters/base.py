"""
Base class for formatters that pipe generated code through an external command.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """
    Runs an external formatter reading source on stdin and writing it to stdout.

    Subclasses only describe the command line. A missing or failing
    command never breaks generation: the code is returned unchanged.
    """

    # Seconds to wait for the external command
    TIMEOUT = 30

    def __init__(self, command: list[str]):
        self.command = list(command)
        self._available = None

    @abstractmethod
    def build_command(self, config: FormatterConfig) -> list[str]:
        """
        Build the full command line used to format code read from stdin.

        Args:
            config: Formatter configuration

        Returns:
            The command and its arguments
        """

    def is_available(self) -> bool:
        """Check once whether `<command> --version` succeeds."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [*self.command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=self.TIMEOUT,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, OSError):
                self._available = False
            if not self._available:
                logger.debug("Formatter %s is not available", " ".join(self.command))
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format code with the external command.

        Args:
            code: The source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if the command is missing or fails
        """
        if not self.is_available():
            return code

        try:
            result = subprocess.run(
                self.build_command(config),
                input=code,
                capture_output=True,
                text=True,
                timeout=self.TIMEOUT,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("Formatter failed: %s", e)
            return code

        if result.returncode == 0:
            return result.stdout
        logger.debug("Formatter exited with code %d: %s", result.returncode, result.stderr.strip())
        return code
