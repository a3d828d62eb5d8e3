"""Data models for planning and execution separation."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Tuple
from enum import Enum

import yaml


class VersionLevel(Enum):
    """Highest rollup level a release version is expanded to."""
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def includes_minor(self) -> bool:
        """Whether ``major.minor`` rollup tags are emitted."""
        return self in (VersionLevel.MINOR, VersionLevel.MAJOR)

    @property
    def includes_major(self) -> bool:
        """Whether ``major`` rollup tags are emitted."""
        return self is VersionLevel.MAJOR


@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version."""
    major: int
    minor: int
    patch: int
    pre_release: Optional[str]
    original: str

    @property
    def is_prerelease(self) -> bool:
        return bool(self.pre_release)


@dataclass(frozen=True)
class RepositoryFacts:
    """Point-in-time snapshot of the inspected repository."""
    commit_full: str
    commit_short: str
    branch: Optional[str] = None
    exact_tag: Optional[str] = None
    remote_url: Optional[str] = None
    committer: Optional[str] = None


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration, constructed once per invocation."""
    # Tag generation
    latest: bool = False
    latest_branch: Optional[str] = None
    no_commit: bool = False
    no_branch: bool = False
    version_level: VersionLevel = VersionLevel.PATCH
    tag_suffix: Optional[str] = None
    version: Optional[str] = None

    # Metadata
    vendor: Optional[str] = None
    license: Optional[str] = None
    maintainer: Optional[str] = None
    url: Optional[str] = None
    registry: Optional[str] = None
    repository: Optional[str] = None

    # Build settings
    build_args: Tuple[str, ...] = ()
    context: str = "."
    dockerfile: Optional[str] = None
    pull: bool = False
    push: bool = False
    prune: bool = False
    username: Optional[str] = None
    password: Optional[str] = None
    dry_run: bool = False

    @property
    def suffix(self) -> str:
        """Suffix appended to every generated tag."""
        return f"-{self.tag_suffix}" if self.tag_suffix else ""

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


@dataclass
class BuildPlan:
    """Complete plan for the build operation."""
    tags: List[str]
    image_references: List[str]
    repository_reference: str
    labels: Dict[str, str] = field(default_factory=dict)
    build_args: List[str] = field(default_factory=list)
    dockerfile: str = "Dockerfile"
    context: str = "."
    pull: bool = False
    no_cache: bool = False
    push: bool = False
    prune: bool = False
    registry: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    dry_run: bool = False

    @property
    def login(self) -> bool:
        """Check if registry credentials are available for a login."""
        return bool(self.username and self.password)

    def to_yaml(self) -> str:
        """Render the plan for display. Credentials are never included."""
        data = {
            "repository": self.repository_reference,
            "tags": list(self.tags),
            "images": list(self.image_references),
            "labels": dict(self.labels),
            "build_args": list(self.build_args),
            "dockerfile": self.dockerfile,
            "context": self.context,
            "pull": self.pull,
            "no_cache": self.no_cache,
            "login": self.login,
            "push": self.push,
            "prune": self.prune,
        }
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


@dataclass
class ExecutionResult:
    """Result of executing a build plan."""
    success: bool
    built: List[str] = field(default_factory=list)
    pushed: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    dry_run: bool = False
