"""Logging setup shared by the command-line entry points."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the nukeconfig logger to write to the current stderr at ``level``."""
    logger = logging.getLogger("nukeconfig")
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
