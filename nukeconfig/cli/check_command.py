"""Check command: report the inclusion decision for resource names."""

import logging

import click

from ..config import RESOURCE_TYPE_KEYS
from ..utils import setup_logging
from .options import config_path_option, load_or_exit, verbose_option

logger = logging.getLogger(__name__)


@click.command()
@config_path_option
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--resource-type",
    "-t",
    type=click.Choice(list(RESOURCE_TYPE_KEYS)),
    required=True,
    help="Resource type whose rules apply to the names",
)
@verbose_option
@click.help_option("-h", "--help")
def check(config_path, names, resource_type, verbose):
    """Print whether each NAME is included or excluded by the configuration."""
    if verbose:
        setup_logging("DEBUG")

    config = load_or_exit(config_path)
    rules = config.get_resource_type(resource_type)

    for name in names:
        decision = "include" if rules.should_include(name) else "exclude"
        logger.debug(f"{resource_type} {name}: {decision}")
        click.echo(f"{decision}\t{name}")
