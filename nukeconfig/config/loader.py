"""Configuration loading from a YAML file."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ConfigIOError, ConfigParseError, PathError, PatternError
from .factory import ConfigurationFactory
from .models import ConfigFile
from .types import Configuration

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """Loads a configuration file and compiles its name filters."""

    def __init__(self):
        """Initialize the loader with a configuration factory."""
        self.factory = ConfigurationFactory()

    def load(self, path: str | os.PathLike) -> Configuration:
        """
        Load, validate and compile the configuration at ``path``.

        Args:
            path: Path to the YAML configuration file, absolute or relative to cwd

        Returns:
            Compiled Configuration

        Raises:
            PathError: If the path cannot be resolved
            ConfigIOError: If the file cannot be read
            ConfigParseError: If the document is not valid YAML or has the wrong shape
            PatternError: If any names_regex entry is not a valid regular expression
        """
        absolute_path = self.resolve_path(path)
        text = self.read_file(absolute_path)
        config_file = self.parse(text, absolute_path)

        try:
            configuration = self.factory.create_configuration(config_file, absolute_path)
        except PatternError as e:
            logger.debug(f"Failed to compile configuration {absolute_path}: {e}")
            raise

        logger.info(
            f"Loaded configuration from {absolute_path} "
            f"({configuration.total_patterns} patterns)"
        )
        return configuration

    def resolve_path(self, path: str | os.PathLike) -> Path:
        """
        Resolve a user-supplied path to an absolute path.

        Raises:
            PathError: If the path is not path-like or cannot be resolved
        """
        try:
            raw_path = Path(path)
        except TypeError as e:
            logger.debug(f"Invalid configuration path {path!r}: {e}")
            raise PathError(f"Invalid configuration path {path!r}: {e}") from e

        if "\x00" in str(raw_path):
            logger.debug(f"Configuration path contains a NUL byte: {path!r}")
            raise PathError(f"Configuration path contains a NUL byte: {path!r}")

        try:
            absolute_path = raw_path.resolve()
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug(f"Failed to resolve configuration path '{path}': {e}")
            raise PathError(f"Failed to resolve configuration path '{path}': {e}") from e

        logger.debug(f"Resolved configuration path: {absolute_path}")
        return absolute_path

    def read_file(self, path: Path) -> str:
        """
        Read the full content of the configuration file.

        Raises:
            ConfigIOError: If the file is missing, is a directory or is not readable
            ConfigParseError: If the content is not valid UTF-8
        """
        try:
            with open(path, encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            logger.debug(f"Configuration file not found: {path}")
            raise ConfigIOError("Configuration file not found", source_path=path) from e
        except PermissionError as e:
            logger.debug(f"Permission denied reading configuration: {path}")
            raise ConfigIOError("Permission denied reading configuration", source_path=path) from e
        except UnicodeDecodeError as e:
            logger.debug(f"Configuration file is not valid UTF-8: {path}")
            raise ConfigParseError(
                f"Configuration file is not valid UTF-8: {e}", source_path=path
            ) from e
        except OSError as e:
            logger.debug(f"Failed to read configuration {path}: {e}")
            raise ConfigIOError(f"Failed to read configuration: {e}", source_path=path) from e

    def parse(self, text: str, path: Path | None = None) -> ConfigFile:
        """
        Parse YAML text into a validated ConfigFile.

        An empty document yields a ConfigFile with no patterns.

        Raises:
            ConfigParseError: If the YAML is malformed or has the wrong structure
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.debug(f"Failed to parse YAML configuration {path}: {e}")
            raise ConfigParseError(f"Failed to parse YAML: {e}", source_path=path) from e

        if data is None:
            logger.warning(f"Configuration file is empty: {path}")
            data = {}

        if not isinstance(data, dict):
            logger.debug(f"Configuration file must contain a YAML object: {path}")
            raise ConfigParseError(
                f"Configuration must be a YAML object, got {type(data).__name__}",
                source_path=path,
            )

        return self._validate(data, path)

    def _validate(self, data: dict[str, Any], path: Path | None) -> ConfigFile:
        """Validate raw YAML data, converting pydantic errors to ConfigParseError."""
        try:
            return ConfigFile.model_validate(data)
        except ValidationError as e:
            error_details = []
            for error in e.errors():
                location = " -> ".join(str(x) for x in error["loc"]) if error["loc"] else "root"
                error_details.append(f"{location}: {error['msg']}")

            error_message = "Configuration validation failed:\n" + "\n".join(error_details)
            logger.debug(f"{error_message} ({path})")
            raise ConfigParseError(error_message, source_path=path) from e


def load_config(path: str | os.PathLike) -> Configuration:
    """Load and compile the configuration file at ``path``."""
    return ConfigurationLoader().load(path)
