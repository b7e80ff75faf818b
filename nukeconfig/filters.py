"""Include/exclude decision for resource names."""

import re
from collections.abc import Iterable
from typing import TypeAlias

PatternSet: TypeAlias = Iterable[re.Pattern[str]]


def matches_any(name: str, patterns: PatternSet) -> bool:
    """Return True if any pattern finds a match anywhere in ``name``."""
    return any(pattern.search(name) for pattern in patterns)


def should_include(name: str, include_patterns: PatternSet, exclude_patterns: PatternSet) -> bool:
    """
    Decide whether a resource name should be acted upon.

    Include rules take precedence: when any are given, the name must match one
    of them, and an exclude match still removes it. With only exclude rules,
    everything not excluded is included. With no rules at all, everything is
    included.

    Args:
        name: Resource name to check
        include_patterns: Compiled include patterns for the resource type
        exclude_patterns: Compiled exclude patterns for the resource type

    Returns:
        True if the name should be included
    """
    include_patterns = tuple(include_patterns)
    exclude_patterns = tuple(exclude_patterns)

    if include_patterns:
        if not matches_any(name, include_patterns):
            return False
        return not matches_any(name, exclude_patterns)

    if exclude_patterns:
        return not matches_any(name, exclude_patterns)

    return True
