"""CLI command for listing the registered tasks."""

import sys

import click

from schematool import from_yaml
from schematool.cli.commands.options import parse_vars, vars_option
from schematool.core.exceptions import SchemaToolPluginError
from schematool.tasks.base import SchemaToolTask


@click.command("tasks")
@click.argument("build_path", type=click.Path())
@vars_option
def list_tasks(build_path: str, vars: tuple):
    """List the tasks registered for a build file.

    Examples:

        schematool tasks build.yaml
    """
    try:
        project = from_yaml(build_path, cli_vars=parse_vars(vars))
    except SchemaToolPluginError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(f"Tasks for project '{project.name}':")
    for task in project.tasks:
        line = f"  - {task.name}"
        if isinstance(task, SchemaToolTask):
            line += f" ({task.mode})"
            if task.skip:
                line += " [skipped]"
        click.echo(line)
