"""Configuration loading and compilation for nukeconfig."""

from .exceptions import ConfigError, ConfigIOError, ConfigParseError, PathError, PatternError
from .factory import ConfigurationFactory
from .loader import ConfigurationLoader, load_config
from .models import ConfigFile, FilterRuleModel, ResourceTypeModel
from .types import (
    EXCLUDE,
    IAM_USERS,
    INCLUDE,
    RESOURCE_TYPE_KEYS,
    S3,
    Configuration,
    FilterRule,
    ResourceType,
)

__all__ = [
    "ConfigError",
    "ConfigFile",
    "ConfigIOError",
    "ConfigParseError",
    "Configuration",
    "ConfigurationFactory",
    "ConfigurationLoader",
    "EXCLUDE",
    "FilterRule",
    "FilterRuleModel",
    "IAM_USERS",
    "INCLUDE",
    "PathError",
    "PatternError",
    "RESOURCE_TYPE_KEYS",
    "ResourceType",
    "ResourceTypeModel",
    "S3",
    "load_config",
]
