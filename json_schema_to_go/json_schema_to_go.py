import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, CodeWriteError, OutputMode, PipelineGenerator, SchemaResolutionError


@click.command()
@click.option("--console", "-c", is_flag=True, default=False, help="Output to console instead of file")
@click.option(
    "--out-file",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Filename for output; default is <root type>_schematype.go",
)
@click.option("--package", "package_name", default=None, type=str, help='Package name for generated file; default is "main"')
@click.option("--root-type", default=None, type=str, help="Name of root type; default is generated from the filename")
@click.option("--prefix", default=None, type=str, help="Prefix for non-root types")
@click.option(
    "--export/--no-export",
    default=None,
    help="Exported type names; default is on unless the package is main",
)
@click.option("--config", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "format_code", is_flag=True, default=False, help="Run gofmt on the generated code")
@click.option("--no-overwrite", is_flag=True, default=False, help="Fail if the output file already exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log type resolution details")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def json_schema_to_go(
    console,
    out_file,
    package_name,
    root_type,
    prefix,
    export,
    config,
    format_code,
    no_overwrite,
    verbose,
    input_file,
):
    """Generate Go types from the JSON schema in INPUT_FILE."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with open(input_file, encoding="utf-8") as f:
            schema = json.load(f)

        config_dict = {}
        if config is not None:
            with open(config, encoding="utf-8") as f:
                config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Error parsing JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Error reading file, UTF-8 expected: {e}") from e

    try:
        generator_config = CodeGeneratorConfig.from_dict(config_dict)
    except (ValueError, TypeError, AttributeError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    # Command line flags override the config file
    if package_name is not None:
        generator_config.package_name = package_name
    if root_type is not None:
        generator_config.root_type_name = root_type
    if prefix is not None:
        generator_config.type_name_prefix = prefix
    if export is not None:
        generator_config.export_types = export
    elif "export_types" not in config_dict:
        generator_config.export_types = generator_config.package_name != "main"
    if format_code:
        generator_config.formatter.enabled = True
    if no_overwrite:
        generator_config.output.mode = OutputMode.ERROR_IF_EXISTS

    schema_name = Path(input_file).name.split(".")[0]
    command = reconstruct_command_line(json_schema_to_go)
    generator = PipelineGenerator(schema_name, schema, generator_config, command=command)

    try:
        code = generator.generate()
        if console:
            click.echo(code, nl=False)
        else:
            output = Path(out_file) if out_file else generator.default_output_path()
            generator.write(output, code)
    except (SchemaResolutionError, CodeWriteError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
