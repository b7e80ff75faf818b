"""Include/exclude name filtering for cloud resource cleanup."""

from .config import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    Configuration,
    FilterRule,
    PathError,
    PatternError,
    ResourceType,
    load_config,
)
from .filters import matches_any, should_include

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "Configuration",
    "FilterRule",
    "PathError",
    "PatternError",
    "ResourceType",
    "load_config",
    "matches_any",
    "should_include",
]
