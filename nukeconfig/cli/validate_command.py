"""Validate command: load a configuration file and summarize its rules."""

import click

from ..utils import setup_logging
from .options import config_path_option, load_or_exit, verbose_option


@click.command()
@config_path_option
@verbose_option
@click.help_option("-h", "--help")
def validate(config_path, verbose):
    """Check that the configuration loads and every pattern compiles."""
    if verbose:
        setup_logging("DEBUG")

    config = load_or_exit(config_path)

    click.echo(f"Configuration OK: {config.path}")
    for key, resource_type in config.resource_types.items():
        click.echo(
            f"  {key}: {len(resource_type.include.names_regex)} include, "
            f"{len(resource_type.exclude.names_regex)} exclude"
        )
