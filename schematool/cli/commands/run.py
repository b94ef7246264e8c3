"""CLI command for running tasks."""

import sys

import click

from schematool import from_yaml
from schematool.cli.commands.options import parse_vars, vars_option
from schematool.core.exceptions import SchemaToolPluginError
from schematool.core.logging import configure_logging


@click.command()
@click.argument("build_path", type=click.Path())
@click.argument("task_name")
@vars_option
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: INFO)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def run(build_path: str, task_name: str, vars: tuple, log_level: str, json_logs: bool):
    """Run a task and the tasks it depends on.

    Examples:

        schematool run build.yaml createDatabaseTables
        schematool run build.yaml schemainfo --log-level DEBUG --json-logs
    """
    configure_logging(level=log_level, json_format=json_logs)

    try:
        project = from_yaml(build_path, cli_vars=parse_vars(vars))
        executed = project.run(task_name)
    except SchemaToolPluginError as e:
        click.echo(f"✗ Task '{task_name}' failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Ran {', '.join(executed)}")
