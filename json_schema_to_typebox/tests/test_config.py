"""
Tests for the generator configuration.
"""

from __future__ import annotations

import pytest

from json_schema_to_typebox.pipeline.config import CodeGeneratorConfig, EnumMode, FormatterConfig, OutputMode


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.enum_mode == EnumMode.INLINE
    assert config.integer_as_integer is False
    assert config.add_generation_comment is True
    assert config.formatter.enabled is False
    assert config.output.mode == OutputMode.ERROR_IF_EXISTS
    assert config.output.atomic_write is True


def test_from_dict():
    config = CodeGeneratorConfig.from_dict(
        {
            "enum_mode": "preferEnum",
            "header": "hello",
            "ignore_options": ["$comment"],
            "formatter": {"enabled": True, "line_length": 100},
            "output": {"mode": "force", "atomic_write": False},
            "unknown_key": 1,
        }
    )
    assert config.enum_mode == EnumMode.PREFER_ENUM
    assert config.header == "hello"
    assert config.ignore_options == ["$comment"]
    assert config.formatter == FormatterConfig(enabled=True, line_length=100)
    assert config.output.mode == OutputMode.FORCE
    assert config.output.atomic_write is False
    assert not hasattr(config, "unknown_key")


def test_round_trip():
    config = CodeGeneratorConfig(enum_mode=EnumMode.UNION, add_root_id=True, integer_as_integer=True)
    assert CodeGeneratorConfig.from_dict(config.to_dict()) == config


def test_invalid_enum_mode():
    with pytest.raises(ValueError):
        CodeGeneratorConfig.from_dict({"enum_mode": "bogus"})
    with pytest.raises(ValueError):
        CodeGeneratorConfig(enum_mode="bogus")


def test_invalid_output_mode():
    with pytest.raises(ValueError):
        CodeGeneratorConfig.from_dict({"output": {"mode": "merge"}})


@pytest.mark.parametrize(
    "mode, declares_enum, declares_union, references_enum",
    [
        (EnumMode.INLINE, False, False, False),
        (EnumMode.ENUM, True, False, True),
        (EnumMode.UNION, False, True, False),
        (EnumMode.PREFER_ENUM, True, True, True),
        (EnumMode.PREFER_UNION, True, True, False),
    ],
)
def test_enum_mode_policies(mode, declares_enum, declares_union, references_enum):
    assert mode.declares_enum is declares_enum
    assert mode.declares_union is declares_union
    assert mode.references_enum is references_enum
