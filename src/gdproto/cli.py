"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from gdproto.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from gdproto.model_export import OUTPUT_FORMATS
from gdproto.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_resolution_run,
    load_and_resolve,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="gdproto")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Resolve protobuf descriptor sets into engine binding models."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write the template context to (stdout when omitted)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="yaml",
    show_default=True,
    help="Serialisation of the template context",
)
def resolve(config_path: str, output_path: str | None, output_format: str) -> None:
    """Resolve the configured descriptor set and emit its template context."""
    try:
        outcome = execute_resolution_run(
            RunRequest(
                config_path=config_path,
                output_path=output_path,
                output_format=output_format,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is None:
        click.echo(outcome.rendered, nl=False)
    else:
        click.echo(str(outcome.output_path))


@cli.command(name="inspect")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration file",
)
def inspect(config_path: str) -> None:
    """Print a per-file summary of the resolved descriptor set."""
    try:
        _, resolved = load_and_resolve(config_path)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for schema_file in resolved.files:
        dependencies = ", ".join(schema_file.dependencies) or "none"
        click.echo(
            f"{schema_file.path}: {len(schema_file.messages)} message(s), "
            f"{len(schema_file.enums)} enum(s); depends on: {dependencies}"
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
