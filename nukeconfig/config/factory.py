"""Factory converting a validated raw document into a compiled Configuration."""

import logging
import re
from pathlib import Path

from .exceptions import PatternError
from .models import ConfigFile, FilterRuleModel
from .types import DIRECTIONS, RESOURCE_TYPE_KEYS, Configuration, FilterRule, ResourceType

logger = logging.getLogger(__name__)


class ConfigurationFactory:
    """Compiles every names_regex entry of a ConfigFile into runtime types."""

    def create_configuration(self, config_file: ConfigFile, path: Path | None = None) -> Configuration:
        """
        Create a Configuration from a validated ConfigFile.

        Each (resource type, direction) slot is compiled in turn. The first pattern
        that fails to compile aborts the whole conversion, so a Configuration is
        only built once every slot has compiled.

        Args:
            config_file: Validated raw configuration
            path: Absolute path the configuration was loaded from

        Returns:
            Compiled Configuration

        Raises:
            PatternError: If any pattern is not a valid regular expression
        """
        resource_types: dict[str, ResourceType] = {}

        for key, attr in RESOURCE_TYPE_KEYS.items():
            raw_resource_type = getattr(config_file, attr)
            rules = {
                direction: self.create_filter_rule(
                    getattr(raw_resource_type, direction), key, direction, path
                )
                for direction in DIRECTIONS
            }
            resource_types[attr] = ResourceType(**rules)

        return Configuration(path=path, **resource_types)

    def create_filter_rule(
        self,
        raw_rule: FilterRuleModel,
        resource_type: str,
        direction: str,
        path: Path | None = None,
    ) -> FilterRule:
        """Compile one slot's patterns in declaration order."""
        compiled = []
        for pattern in raw_rule.names_regex:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise PatternError(
                    f"Invalid regex pattern '{pattern}' in {resource_type}.{direction}: {e}",
                    pattern=pattern,
                    resource_type=resource_type,
                    direction=direction,
                    source_path=path,
                ) from e

        logger.debug(f"Compiled {len(compiled)} {direction} patterns for {resource_type}")
        return FilterRule(names_regex=tuple(compiled))
