"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

COMMAND_NAME = "json_schema_to_typebox"


def reconstruct_command_line(click_command: click.Command, command_name: str = COMMAND_NAME) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection
        command_name: Name the command line starts with

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context
        return command_name

    if not cli_args:
        return command_name

    cmd_parts = [command_name]
    arguments = []
    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if value is None or value == "":
            continue
        if value is False and not getattr(param, "secondary_opts", None):
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))

        elif isinstance(param, click.Option):
            if value == param.default:
                continue

            flag = _flag_for(param, value)
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _format_value(value)])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def _format_value(value) -> str:
    """Show file paths by name only for a cleaner comment."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def _flag_for(param: click.Option, value) -> str:
    """Pick the long option name, or the secondary one of an on/off switch."""
    if param.is_flag and value is False and param.secondary_opts:
        return param.secondary_opts[0]
    long_opts = [opt for opt in param.opts if opt.startswith("--")]
    if long_opts:
        return long_opts[0]
    return param.opts[0] if param.opts else f"--{param.name}"
