"""Configuration-specific exceptions."""

from pathlib import Path


class ConfigError(Exception):
    """Base class for errors raised while loading a configuration file."""

    def __init__(self, message: str, source_path: str | Path | None = None):
        self.message = message
        self.source_path = str(source_path) if source_path is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.source_path:
            return f"{self.message} (in {self.source_path})"
        return self.message


class PathError(ConfigError):
    """The supplied path cannot be resolved to an absolute path."""


class ConfigIOError(ConfigError):
    """The configuration file cannot be opened or read."""


class ConfigParseError(ConfigError):
    """The document is not valid YAML or does not have the expected shape."""


class PatternError(ConfigError):
    """A names_regex entry is not a valid regular expression."""

    def __init__(
        self,
        message: str,
        pattern: str,
        resource_type: str | None = None,
        direction: str | None = None,
        source_path: str | Path | None = None,
    ):
        self.pattern = pattern
        self.resource_type = resource_type
        self.direction = direction
        super().__init__(message, source_path=source_path)
