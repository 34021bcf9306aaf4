import json
import logging
from pathlib import Path

import click

from . import __version__
from .cli_utils import reconstruct_command_line
from .errors import SchemaConversionError
from .pipeline import AtomicWriter, CodeGeneratorConfig, EnumMode, OutputMode, PipelineGenerator, load_schema
from .pipeline.analyzer import base_uri_for

logger = logging.getLogger(__name__)


def load_config(config_path: str | None) -> CodeGeneratorConfig:
    if config_path is None:
        return CodeGeneratorConfig()
    with open(config_path, encoding="utf-8") as f:
        return CodeGeneratorConfig.from_dict(json.load(f))


def generation_comment(command: click.Command) -> str:
    return f"// Generated by json_schema_to_typebox v{__version__} : {reconstruct_command_line(command)}"


@click.command()
@click.option("--input", "-i", "input_path", default="schema.json", show_default=True, type=click.Path(dir_okay=False), help="JSON schema file to convert")
@click.option("--output", "-o", "output_path", default="generated-typebox.ts", show_default=True, type=click.Path(dir_okay=False), help="File the generated code is written to")
@click.option("--output-stdout", is_flag=True, default=False, help="Print the generated code instead of writing a file")
@click.option("--config", "-c", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON file with generator options")
@click.option("--enum-mode", default=None, type=click.Choice([mode.value for mode in EnumMode]), help="How enum schemas are generated")
@click.option("--header", default=None, type=str, help="Text added as a comment at the top of the file")
@click.option("--format/--no-format", "format_code", default=None, help="Run prettier on the generated code")
@click.option("--force", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", is_flag=True, default=False, help="Log debug information to stderr")
@click.version_option(__version__, prog_name="json_schema_to_typebox")
def json_schema_to_typebox(input_path, output_path, output_stdout, config_path, enum_mode, header, format_code, force, verbose):
    """Generate TypeBox code from a JSON schema."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(config_path)
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        raise click.ClickException(f"Invalid config file {config_path}: {e}") from e

    # Command line flags override the config file
    if enum_mode is not None:
        config.enum_mode = EnumMode(enum_mode)
    if header is not None:
        config.header = header
    if format_code is not None:
        config.formatter.enabled = format_code
    if force:
        config.output.mode = OutputMode.FORCE

    input_file = Path(input_path)
    try:
        text = input_file.read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Could not read input file {input_path}: {e}") from e

    try:
        schema = load_schema(text)
        codegen = PipelineGenerator(
            schema,
            config,
            base_uri=base_uri_for(input_file.resolve()),
            generation_comment=generation_comment(json_schema_to_typebox),
        )
        out = codegen.generate()
    except SchemaConversionError as e:
        raise click.ClickException(str(e)) from e

    if output_stdout:
        click.echo(out, nl=False)
        return

    output_file = Path(output_path)
    try:
        if config.output.atomic_write:
            writer = AtomicWriter()
            if config.output.mode == OutputMode.FORCE:
                writer.write(output_file, out)
            else:
                writer.write_if_not_exists(output_file, out)
        else:
            if output_file.exists() and config.output.mode != OutputMode.FORCE:
                raise FileExistsError(f"Output file already exists: {output_file}. Use force mode to overwrite.")
            output_file.write_text(out, encoding="utf-8")
    except (SchemaConversionError, OSError) as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Generated %s from %s", output_file, input_file)
