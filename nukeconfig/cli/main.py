"""Main CLI entry point for nukeconfig."""

import sys

import click

from ..utils import setup_logging
from .check_command import check
from .validate_command import validate


@click.group(invoke_without_command=True)
@click.pass_context
@click.help_option("-h", "--help")
def main(ctx):
    """nukeconfig - Include/exclude name filters for cloud resource cleanup."""
    setup_logging()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(1)


main.add_command(check)
main.add_command(validate)
