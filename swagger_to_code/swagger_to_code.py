import logging

import click

from .config_reader import read_config
from .exceptions import SwaggerCodegenError, ValidationError
from .pipeline import PipelineGenerator
from .pipeline.backends import BACKENDS


@click.command()
@click.argument("config", required=False, default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--language", "-l", default=None, type=click.Choice(list(BACKENDS)))
@click.option("--spec", "-s", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--name", "-n", default=None, type=str, help="API name, required with --spec")
@click.option("--class-name", default=None, type=str, help="Name of the generated API class")
@click.option("--base-path", default=None, type=str, help="Prefix for every method path")
@click.option("--output", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--snake", is_flag=True, default=False, help="Use snake_case identifiers")
@click.option("--no-operation-ids", is_flag=True, default=False, help="Name methods after their path, ignoring operationId")
@click.option("--version", "api_version", default=None, type=str, help="API version, overrides info.version")
@click.option("--verbose", "-v", is_flag=True, default=False)
def swagger_to_code(config, language, spec, name, class_name, base_path, output, snake, no_operation_ids, api_version, verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        run = read_config(
            config,
            language=language,
            spec=spec,
            name=name,
            class_name=class_name,
            base_path=base_path,
            output=output,
            opts={"snake": snake or None, "no_operation_ids": no_operation_ids or None, "version": api_version},
        )
        codegen = PipelineGenerator(run.apis, run.language, run.config)
        files = codegen.generate(run.output)
    except ValidationError as exc:
        click.echo(exc.report, err=True)
        raise SystemExit(1) from exc
    except SwaggerCodegenError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Generated {len(files)} files in {run.output}")
