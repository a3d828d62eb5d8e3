"""
Environment Configuration Module

Handles parsing and validation of command line options and their
environment variable fallbacks. This is a pure module - no side effects,
just data transformation.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Optional, Any, Mapping
import logging

from .config import DEFAULT_REGISTRY, DEFAULT_VENDOR, DEFAULT_DOCKERFILE, ENV_PREFIX, TRUTHY_VALUES
from .exceptions import ConfigurationError
from .models import BuildConfig, RepositoryFacts, VersionLevel
from .utils import repository_name_from_url

logger = logging.getLogger(__name__)

BOOLEAN_OPTIONS = ("latest", "prune", "pull", "push", "no_commit", "no_branch", "dry_run")
STRING_OPTIONS = (
    "context", "dockerfile", "latest_branch", "license", "maintainer", "password",
    "version_level", "repository", "registry", "suffix", "username", "url",
    "version", "vendor",
)
BUILD_ARGS_ENV = ENV_PREFIX + "ARGS"


def env_name(option: str) -> str:
    """Name of the environment variable backing an option, e.g. DOCKER_BUILD_NO_COMMIT."""
    return ENV_PREFIX + option.upper()


def parse_bool(value: Optional[str]) -> bool:
    """Interpret an environment variable value as boolean."""
    return (value or "").strip().lower() in TRUTHY_VALUES


@dataclass
class EnvironmentConfig:
    """Configuration merged from command line options and environment variables."""

    path: str = "."
    build_args: List[str] = field(default_factory=list)
    context: Optional[str] = None
    dockerfile: Optional[str] = None
    latest: bool = False
    latest_branch: Optional[str] = None
    license: Optional[str] = None
    maintainer: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    prune: bool = False
    pull: bool = False
    push: bool = False
    version_level: str = VersionLevel.PATCH.value
    no_commit: bool = False
    no_branch: bool = False
    repository: Optional[str] = None
    registry: str = DEFAULT_REGISTRY
    suffix: Optional[str] = None
    username: Optional[str] = None
    url: Optional[str] = None
    version: Optional[str] = None
    vendor: str = DEFAULT_VENDOR
    dry_run: bool = False

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str],
        overrides: Optional[Dict[str, Any]] = None
    ) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Values in ``overrides`` (typically parsed command line options) win
        over the environment; ``None`` values in ``overrides`` are ignored.

        Args:
            env: Dictionary of environment variables (typically os.environ)
            overrides: Optional dictionary of command line option values

        Returns:
            EnvironmentConfig instance
        """
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        values: Dict[str, Any] = {}

        for option in BOOLEAN_OPTIONS:
            if option in overrides:
                values[option] = bool(overrides[option])
            elif env_name(option) in env:
                values[option] = parse_bool(env[env_name(option)])

        for option in STRING_OPTIONS:
            if option in overrides:
                values[option] = overrides[option]
            elif env.get(env_name(option), "").strip():
                values[option] = env[env_name(option)].strip()

        # Build args are repeatable on the command line, whitespace separated in the environment
        if overrides.get("build_args"):
            values["build_args"] = list(overrides["build_args"])
        elif env.get(BUILD_ARGS_ENV, "").strip():
            values["build_args"] = env[BUILD_ARGS_ENV].split()

        if "path" in overrides:
            values["path"] = overrides["path"]

        return cls(**values)

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        try:
            VersionLevel((self.version_level or "").lower())
        except ValueError:
            valid_levels = [level.value for level in VersionLevel]
            errors.append(
                f"Invalid version level '{self.version_level}'. "
                f"Valid options are: {', '.join(valid_levels)}"
            )

        repository_path = Path(self.path)
        if not repository_path.exists():
            errors.append(f"Repository path does not exist: {self.path}")
        elif not repository_path.is_dir():
            errors.append(f"Repository path is not a directory: {self.path}")

        for i, build_arg in enumerate(self.build_args, 1):
            if not build_arg.split("=", 1)[0]:
                errors.append(f"Build argument {i} must be in format 'NAME[=value]': '{build_arg}'")

        return errors

    def to_build_config(self, facts: RepositoryFacts) -> BuildConfig:
        """Resolve defaults that depend on the repository and freeze the configuration.

        Expects a configuration that passed ``validate()``.

        Args:
            facts: Repository facts, used to derive the repository name

        Returns:
            BuildConfig instance

        Raises:
            ConfigurationError: If the version level is invalid or no
                repository name can be determined
        """
        try:
            version_level = VersionLevel((self.version_level or "").lower())
        except ValueError as e:
            raise ConfigurationError(f"Invalid version level '{self.version_level}'") from e

        if bool(self.username) != bool(self.password):
            logger.warning("Only one of username and password is set, registry login will be skipped")

        repository = self.repository or repository_name_from_url(facts.remote_url)
        if not repository:
            raise ConfigurationError(
                "Could not determine the image repository name: "
                "set --repository or configure an 'origin' remote"
            )

        repository_path = Path(self.path).resolve()
        context = Path(self.context).resolve() if self.context else repository_path
        dockerfile = Path(self.dockerfile).resolve() if self.dockerfile else context / DEFAULT_DOCKERFILE

        return BuildConfig(
            latest=self.latest,
            latest_branch=self.latest_branch,
            no_commit=self.no_commit,
            no_branch=self.no_branch,
            version_level=version_level,
            tag_suffix=self.suffix,
            version=self.version,
            vendor=self.vendor,
            license=self.license,
            maintainer=self.maintainer,
            url=self.url,
            registry=self.registry,
            repository=repository,
            build_args=tuple(self.build_args),
            context=str(context),
            dockerfile=str(dockerfile),
            pull=self.pull,
            push=self.push,
            prune=self.prune,
            username=self.username,
            password=self.password,
            dry_run=self.dry_run,
        )
