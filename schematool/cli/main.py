"""Main CLI entry point for schematool."""

import click

from schematool import __version__
from schematool.cli.commands.run import run
from schematool.cli.commands.show_command import show_command
from schematool.cli.commands.tasks import list_tasks
from schematool.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """schematool - DataNucleus SchemaTool tasks for a build."""
    pass


main.add_command(list_tasks)
main.add_command(validate)
main.add_command(show_command)
main.add_command(run)


if __name__ == "__main__":
    main()
