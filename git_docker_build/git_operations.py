"""
Git Operations Module for Git Docker Build

This module is the repository inspector: it opens the local Git repository and
reads the facts the tag planner and label builder work on.

Functions:
    open_repository: Opens the Git repository at a path
    read_repository_facts: Reads branch, tag, commit, remote and committer

Raises:
    ConfigurationError: When the path is missing or not a Git repository
    ExternalToolError: When Git operations fail
"""

import logging
from typing import Optional

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from .config import DEFAULT_REMOTE
from .exceptions import ConfigurationError, ExternalToolError
from .models import RepositoryFacts

logger = logging.getLogger(__name__)


def open_repository(path: str) -> Repo:
    """Open the Git repository containing ``path``."""
    try:
        return Repo(path, search_parent_directories=True)
    except NoSuchPathError as e:
        raise ConfigurationError(f"Repository path does not exist: {path}") from e
    except InvalidGitRepositoryError as e:
        raise ConfigurationError(f"Not a git repository: {path}") from e


class RepositoryInspector:
    """Reads plain string facts from a Git repository."""

    def __init__(self, repo: Repo, remote: str = DEFAULT_REMOTE):
        """Initialize the inspector.

        Args:
            repo: Git repository object
            remote: Name of the remote whose URL is reported
        """
        self.repo = repo
        self.remote = remote

    def branch(self) -> Optional[str]:
        """Current branch name, None on a detached HEAD."""
        if self.repo.head.is_detached:
            return None
        return self.repo.active_branch.name

    def exact_tag(self) -> Optional[str]:
        """Tag pointing exactly at HEAD, None if there is none."""
        try:
            return self.repo.git.describe("--tags", "--exact-match", "HEAD").strip() or None
        except GitCommandError:
            logger.debug("No tag points at HEAD")
            return None

    def commit_full(self) -> str:
        return self._rev_parse("HEAD")

    def commit_short(self) -> str:
        return self._rev_parse("--short", "HEAD")

    def remote_url(self) -> Optional[str]:
        """URL of the configured remote, None if the remote does not exist."""
        if self.remote not in [remote.name for remote in self.repo.remotes]:
            return None
        try:
            return self.repo.remote(self.remote).url or None
        except GitCommandError:
            logger.debug(f"Remote '{self.remote}' has no URL")
            return None

    def committer(self) -> Optional[str]:
        """Committer of HEAD as 'Name <email>'."""
        committer = self.repo.head.commit.committer
        if not committer.name and not committer.email:
            return None
        if not committer.email:
            return committer.name
        return f"{committer.name} <{committer.email}>"

    def _rev_parse(self, *args: str) -> str:
        try:
            return self.repo.git.rev_parse(*args).strip()
        except GitCommandError as e:
            raise ExternalToolError(
                f"Failed to resolve commit: {e.stderr.strip() if e.stderr else e}",
                command=["git", "rev-parse", *args],
                output=e.stderr,
            ) from e


def read_repository_facts(repo: Repo) -> RepositoryFacts:
    """Read an immutable snapshot of the repository facts."""
    inspector = RepositoryInspector(repo)
    facts = RepositoryFacts(
        commit_full=inspector.commit_full(),
        commit_short=inspector.commit_short(),
        branch=inspector.branch(),
        exact_tag=inspector.exact_tag(),
        remote_url=inspector.remote_url(),
        committer=inspector.committer(),
    )
    logger.debug(f"Repository facts: {facts}")
    return facts
