"""Test fixtures for Git Docker Build.

This module provides shared fixtures used across multiple test modules.
It sets up repository facts, build configurations and a real temporary
Git repository for the inspector tests.

Fixtures:
    facts: Repository facts of a typical branch build
    config: Build configuration with default settings
    git_repo: Creates a temporary Git repository with one commit
"""

import pytest
from git import Actor, Repo

from git_docker_build.models import BuildConfig, RepositoryFacts

COMMIT_FULL = "3f786850e387550fdab836ed7e6dc881de23001b"
COMMIT_SHORT = "3f78685"
REMOTE_URL = "https://github.com/52North/Example-Service.git"
COMMITTER = Actor("Jane Doe", "jane@example.com")


@pytest.fixture
def facts():
    """Repository facts of a branch build without an exact tag."""
    return RepositoryFacts(
        commit_full=COMMIT_FULL,
        commit_short=COMMIT_SHORT,
        branch="master",
        remote_url=REMOTE_URL,
        committer="Jane Doe <jane@example.com>",
    )


@pytest.fixture
def config():
    """Build configuration with default tag settings."""
    return BuildConfig(
        vendor="52°North GmbH",
        registry="docker.52north.org",
        repository="example-service",
    )


@pytest.fixture
def git_repo(tmp_path):
    """Creates a temporary Git repository with a single commit.

    tmp_path/
    └── repo/
        ├── .git/
        └── Dockerfile

    The repository has an 'origin' remote but no tags.

    Returns:
        Repo: The GitPython repository object
    """
    path = tmp_path / "repo"
    path.mkdir()
    repo = Repo.init(path)
    (path / "Dockerfile").write_text("FROM alpine:3\n")
    repo.index.add(["Dockerfile"])
    repo.index.commit("Initial commit", author=COMMITTER, committer=COMMITTER)
    repo.create_remote("origin", REMOTE_URL)
    return repo
