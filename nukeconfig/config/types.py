"""Runtime configuration types holding compiled patterns."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..filters import should_include

S3 = "s3"
IAM_USERS = "IAMUsers"

# YAML key -> attribute name on Configuration
RESOURCE_TYPE_KEYS = {
    S3: "s3",
    IAM_USERS: "iam_users",
}

INCLUDE = "include"
EXCLUDE = "exclude"
DIRECTIONS = (INCLUDE, EXCLUDE)


@dataclass(frozen=True)
class FilterRule:
    """Compiled name patterns for one direction of a resource type."""

    names_regex: tuple[re.Pattern[str], ...] = ()

    @property
    def patterns(self) -> list[str]:
        """Source text of each compiled pattern, in declaration order."""
        return [expression.pattern for expression in self.names_regex]

    @property
    def is_empty(self) -> bool:
        return not self.names_regex


@dataclass(frozen=True)
class ResourceType:
    """Include and exclude rules for a single resource category."""

    include: FilterRule = field(default_factory=FilterRule)
    exclude: FilterRule = field(default_factory=FilterRule)

    def should_include(self, name: str) -> bool:
        return should_include(name, self.include.names_regex, self.exclude.names_regex)

    def filter_names(self, names: Iterable[str]) -> list[str]:
        """Return the names that pass this resource type's rules, keeping their order."""
        return [name for name in names if self.should_include(name)]


@dataclass(frozen=True)
class Configuration:
    """Final processed configuration with compiled rules per resource type."""

    s3: ResourceType = field(default_factory=ResourceType)
    iam_users: ResourceType = field(default_factory=ResourceType)
    path: Path | None = None

    @property
    def resource_types(self) -> dict[str, ResourceType]:
        """Resource types keyed by their YAML category key."""
        return {key: getattr(self, attr) for key, attr in RESOURCE_TYPE_KEYS.items()}

    def get_resource_type(self, key: str) -> ResourceType:
        """
        Look up a resource type by YAML key (``IAMUsers``) or attribute name (``iam_users``).

        Raises:
            KeyError: If the key names no supported resource type
        """
        if key in RESOURCE_TYPE_KEYS:
            return getattr(self, RESOURCE_TYPE_KEYS[key])
        if key in RESOURCE_TYPE_KEYS.values():
            return getattr(self, key)

        valid_types = ", ".join(RESOURCE_TYPE_KEYS)
        raise KeyError(f"Unknown resource type: {key}. Valid types: {valid_types}")

    @property
    def total_patterns(self) -> int:
        """Total number of compiled patterns across all resource types."""
        return sum(
            len(resource_type.include.names_regex) + len(resource_type.exclude.names_regex)
            for resource_type in self.resource_types.values()
        )
