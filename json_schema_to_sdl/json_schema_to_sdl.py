import json
import logging
from pathlib import Path

import click

from . import __version__
from .cli_utils import generation_comment, reconstruct_command_line
from .pipeline import AtomicWriter, CodeGeneratorConfig, ConversionError, OutputMode, PipelineGenerator

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--no-format", is_flag=True, default=False, help="Write the raw SDL without graphql-core formatting")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def json_schema_to_sdl(config, force, no_format, verbose, path, output):
    """Convert the definitions of a Swagger/OpenAPI JSON document at PATH to GraphQL SDL."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    if config is not None:
        with open(config, encoding="utf-8") as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if no_format:
        config.formatter.enabled = False
    if force:
        config.output.mode = OutputMode.FORCE

    try:
        out = PipelineGenerator.from_document(document, config).generate()
    except ConversionError as e:
        logger.debug("Conversion of %s failed", path, exc_info=True)
        raise click.ClickException(str(e)) from e

    if out and config.add_generation_comment:
        out = generation_comment(__version__, reconstruct_command_line(json_schema_to_sdl)) + out

    if output is None:
        click.echo(out, nl=False)
        return

    output = Path(output)
    try:
        if config.output.atomic_write:
            writer = AtomicWriter()
            if config.output.mode == OutputMode.FORCE:
                writer.write(output, out, validate=config.formatter.enabled)
            else:
                writer.write_if_not_exists(output, out, validate=config.formatter.enabled)
        else:
            if output.exists() and config.output.mode != OutputMode.FORCE:
                raise FileExistsError(f"Output file already exists: {output}. Use --force to overwrite.")
            output.write_text(out, encoding="utf-8")
    except (FileExistsError, ConversionError) as e:
        raise click.ClickException(str(e)) from e
