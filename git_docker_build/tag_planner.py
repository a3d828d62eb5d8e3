"""
Tag Planner Module

Pure functions deriving the image tags of a build from repository facts
and the build configuration. The order of the returned tags is stable:
commit tags, the latest tag, the branch tag, then version tags.
"""

from typing import List, Optional

from .config import LATEST_TAG
from .models import BuildConfig, RepositoryFacts, VersionLevel
from .tag_classification import detect_tag_type, parse_semver, TagType


def plan_tags(facts: RepositoryFacts, config: BuildConfig) -> List[str]:
    """
    Compute the ordered, duplicate free list of image tags.

    Pure function: identical inputs always yield identical output.
    An empty list means no image name could be determined; callers
    decide how to report it.

    Args:
        facts: Repository facts of the current checkout
        config: Build configuration

    Returns:
        List of tags in first-seen order
    """
    suffix = config.suffix
    tags = []

    if not config.no_commit:
        _add(tags, facts.commit_full + suffix)
        _add(tags, facts.commit_short + suffix)

    if _is_latest(facts, config):
        _add(tags, config.tag_suffix or LATEST_TAG)

    if not config.no_branch and facts.branch:
        _add(tags, branch_tag(facts.branch) + suffix)

    for value in (facts.exact_tag, config.version):
        for tag in version_tags(value, suffix, config.version_level):
            _add(tags, tag)

    return tags


def branch_tag(branch: str) -> str:
    """Image tags cannot contain '/', so feature/foo becomes feature-foo."""
    return branch.replace("/", "-")


def version_tags(value: Optional[str], suffix: str, level: VersionLevel) -> List[str]:
    """
    Expand a version value into its image tags.

    Release versions are expanded into rollup tags up to ``level``;
    pre-release versions and plain values are emitted verbatim.

    Args:
        value: Exact git tag or configured version, may be None
        suffix: Suffix appended to every tag
        level: Highest rollup level

    Returns:
        List of tags, empty for absent values
    """
    tag_type = detect_tag_type(value)

    if tag_type == TagType.EMPTY:
        return []

    if tag_type in (TagType.PLAIN, TagType.PRERELEASE):
        return [value + suffix]

    version = parse_semver(value)
    tags = [f"{version.major}.{version.minor}.{version.patch}{suffix}"]
    if level.includes_minor:
        tags.append(f"{version.major}.{version.minor}{suffix}")
    if level.includes_major:
        tags.append(f"{version.major}{suffix}")
    return tags


def _is_latest(facts: RepositoryFacts, config: BuildConfig) -> bool:
    if config.latest:
        return True
    return bool(config.latest_branch) and config.latest_branch == facts.branch


def _add(tags: List[str], tag: str) -> None:
    if tag and tag not in tags:
        tags.append(tag)
