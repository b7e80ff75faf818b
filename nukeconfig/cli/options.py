"""Options shared by nukeconfig commands."""

import sys

import click

from ..config import ConfigError, Configuration, load_config

CONFIG_ERROR_EXIT_CODE = 2

config_path_option = click.option(
    "--config",
    "-c",
    "config_path",
    envvar="NUKECONFIG_FILE",
    required=True,
    type=click.Path(),
    help="Path to the YAML configuration file [env: NUKECONFIG_FILE]",
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging"
)


def load_or_exit(config_path: str) -> Configuration:
    """Load the configuration, reporting errors on stderr and exiting with status 2."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(CONFIG_ERROR_EXIT_CODE)
