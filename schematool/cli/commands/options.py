"""Options shared by several commands."""

import click


def vars_option(func):
    return click.option(
        "--vars",
        multiple=True,
        help="CLI variables in key=value format (can be used multiple times)",
    )(func)


def parse_vars(values: tuple) -> dict[str, str] | None:
    """Turn ``('k=v', ...)`` into a dict, or None when empty."""
    cli_vars = {}
    for var in values:
        if "=" not in var:
            raise click.BadParameter(
                f"Invalid variable format: {var}. Use key=value", param_hint="--vars"
            )
        key, value = var.split("=", 1)
        cli_vars[key] = value
    return cli_vars or None
