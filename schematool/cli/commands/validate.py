"""CLI command for validating build files."""

import sys
from enum import Enum

import click

from schematool import from_yaml
from schematool.cli.commands.options import parse_vars, vars_option
from schematool.core.exceptions import SchemaToolPluginError


@click.command()
@click.argument("build_path", type=click.Path())
@vars_option
def validate(build_path: str, vars: tuple):
    """Validate a build file and show the resolved schema_tool settings.

    Checks YAML syntax, the build file schema, template variables and
    schema_tool setting names. Setting values are checked when a task runs.

    Examples:

        schematool validate build.yaml
        schematool validate build.yaml --vars pu=shop
    """
    try:
        project = from_yaml(build_path, cli_vars=parse_vars(vars))
    except SchemaToolPluginError as e:
        click.echo(f"✗ Build file validation failed: {e}", err=True)
        sys.exit(1)

    snapshot = project.datanucleus.schema_tool.snapshot()
    click.echo(f"✓ Build file for '{project.name}' is valid")
    for name, value in snapshot:
        if isinstance(value, Enum):
            value = value.value
        click.echo(f"  {name}: {value}")
