"""Command line interface entry point."""

from __future__ import annotations

import logging
import os
import sys

import click

from telemetry_protos.configuration import ConfigurationError, load_build_settings
from telemetry_protos.schema_catalog import TELEMETRY_SCHEMA_SOURCES
from telemetry_protos.schema_compilation import (
    CompilationRequest,
    SchemaCompilationError,
    compile_telemetry_schemas,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="telemetry-protos")
def cli() -> None:
    """Build-time code generation for telemetry packet schemas."""


@cli.command(name="generate")
@click.option(
    "--project-root",
    "project_root",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory containing the protos/ schema folder",
)
@click.option(
    "--out-dir",
    "out_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory for generated modules (defaults to $OUT_DIR)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log the compiler invocation to stderr.",
)
def generate(project_root: str, out_dir: str | None, verbose: bool) -> None:
    """Compile the telemetry schemas into Python protobuf modules."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = load_build_settings(
            environ=os.environ, project_root=project_root, output_dir=out_dir
        )
        outcome = compile_telemetry_schemas(
            CompilationRequest(
                project_root=settings.project_root,
                output_dir=settings.output_dir,
            )
        )
    except (ConfigurationError, SchemaCompilationError) as exc:
        raise CliError(str(exc)) from exc
    for artifact in outcome.artifacts:
        click.echo(str(artifact))


@cli.command(name="list-schemas")
def list_schemas() -> None:
    """Print the schema files in compiler input order."""
    for source in TELEMETRY_SCHEMA_SOURCES:
        click.echo(f"{source.packet_kind.value}\t{source.relative_path.as_posix()}")


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
