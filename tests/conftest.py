"""Pytest configuration and shared fixtures."""

import logging
import re
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_nukeconfig_logger():
    """Drop handlers the CLI attaches so later tests do not log to a closed stream."""
    logger = logging.getLogger("nukeconfig")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def temp_config_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    return {
        "s3": {
            "include": {"names_regex": ["^prod-"]},
            "exclude": {"names_regex": ["-tmp$"]},
        },
        "IAMUsers": {
            "exclude": {"names_regex": ["^test-"]},
        },
    }


@pytest.fixture
def prod_pattern():
    return re.compile("^prod-")


@pytest.fixture
def tmp_pattern():
    return re.compile("-tmp$")
