"""
Configuration for the TypeBox code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EnumMode(str, Enum):
    """How `enum` schemas are turned into code.

    INLINE emits the union of literals at the use site. The other modes
    generate a named side declaration and reference it instead.
    """

    INLINE = "inline"
    ENUM = "enum"  # export enum XEnum { ... }
    UNION = "union"  # export const XUnion = Type.Union([...])
    PREFER_ENUM = "preferEnum"  # both, reference the enum
    PREFER_UNION = "preferUnion"  # both, reference the union

    @property
    def declares_enum(self) -> bool:
        return self in (EnumMode.ENUM, EnumMode.PREFER_ENUM, EnumMode.PREFER_UNION)

    @property
    def declares_union(self) -> bool:
        return self in (EnumMode.UNION, EnumMode.PREFER_ENUM, EnumMode.PREFER_UNION)

    @property
    def references_enum(self) -> bool:
        return self in (EnumMode.ENUM, EnumMode.PREFER_ENUM)


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the post-processing formatter."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line length for the formatter (prettier's --print-width)
    line_length: int = 80

    # Use single quotes instead of double quotes
    single_quote: bool = False

    # Command used to invoke prettier
    command: list[str] = field(default_factory=lambda: ["prettier"])


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # How enums are generated
    enum_mode: EnumMode = EnumMode.INLINE

    # Map "integer" to Type.Integer instead of Type.Number
    integer_as_integer: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Extra text emitted as a comment below the generation comment
    header: str = ""

    # Add {"$id": <name>} to the options of the root declaration
    add_root_id: bool = False

    # Schema keys that are never forwarded as options
    ignore_options: list[str] = field(default_factory=list)

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if isinstance(self.enum_mode, str):
            self.enum_mode = EnumMode(self.enum_mode)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "enum_mode":
                config.enum_mode = EnumMode(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "enum_mode": self.enum_mode.value,
            "integer_as_integer": self.integer_as_integer,
            "add_generation_comment": self.add_generation_comment,
            "header": self.header,
            "add_root_id": self.add_root_id,
            "ignore_options": self.ignore_options,
            "formatter": {
                "enabled": self.formatter.enabled,
                "line_length": self.formatter.line_length,
                "single_quote": self.formatter.single_quote,
                "command": self.formatter.command,
            },
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
