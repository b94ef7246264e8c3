"""CLI command for printing the SchemaTool command line of a task."""

import shlex
import sys

import click

from schematool import from_yaml
from schematool.cli.commands.options import parse_vars, vars_option
from schematool.core.exceptions import SchemaToolPluginError
from schematool.tasks.base import SchemaToolTask


@click.command("show-command")
@click.argument("build_path", type=click.Path())
@click.argument("task_name")
@vars_option
def show_command(build_path: str, task_name: str, vars: tuple):
    """Print the command a SchemaTool task would run, without running it.

    Examples:

        schematool show-command build.yaml createDatabaseTables
    """
    try:
        project = from_yaml(build_path, cli_vars=parse_vars(vars))
        task = project.tasks.get(task_name)
        if not isinstance(task, SchemaToolTask):
            click.echo(f"✗ '{task_name}' is not a SchemaTool task", err=True)
            sys.exit(1)
        invocation = task.build_invocation()
    except SchemaToolPluginError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(shlex.join(invocation.command()))
