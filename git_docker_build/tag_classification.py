"""
Tag Classification Module

Pure functions for detecting and parsing semantic version tags.
This module contains no side effects - only version analysis logic.
"""

import re
from enum import Enum
from typing import Optional

from .models import SemVer


SEMVER_PATTERN = re.compile(
    r"^v?[0-9]+(\.[0-9]+)*(-[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?$"
)


class TagType(Enum):
    """Enum for different tag value types."""
    SEMVER = "semver"
    PRERELEASE = "prerelease"
    PLAIN = "plain"
    EMPTY = "empty"


def is_semver(value: str) -> bool:
    """Check whether a string is a (possibly ``v`` prefixed) semantic version."""
    if not value:
        return False
    return SEMVER_PATTERN.match(value) is not None


def parse_semver(value: str) -> SemVer:
    """
    Parse a semantic version string.

    The leading ``v`` is stripped and the string is split on the first ``-``
    into the version part and the pre-release label. Missing version
    components default to 0, so ``v1.2`` parses as ``1.2.0``.

    Args:
        value: The version string

    Returns:
        SemVer with the numeric components and optional pre-release label

    Raises:
        ValueError: If the value is not a semantic version
    """
    if not is_semver(value):
        raise ValueError(f"Not a semantic version: '{value}'")

    version, _, label = value[1:].partition("-") if value.startswith("v") else value.partition("-")
    parts = [int(part) for part in version.split(".")]

    def component(index: int) -> int:
        return parts[index] if index < len(parts) else 0

    return SemVer(
        major=component(0),
        minor=component(1),
        patch=component(2),
        pre_release=label or None,
        original=value,
    )


def prerelease_label(value: str) -> Optional[str]:
    """Return the pre-release label of a semantic version, or None."""
    if not is_semver(value):
        return None
    return parse_semver(value).pre_release


def detect_tag_type(value: Optional[str]) -> TagType:
    """
    Determine the type of a version or tag value.

    Args:
        value: The tag string, may be None

    Returns:
        TagType enum value
    """
    if not value:
        return TagType.EMPTY

    if not is_semver(value):
        return TagType.PLAIN

    if prerelease_label(value):
        return TagType.PRERELEASE

    return TagType.SEMVER
