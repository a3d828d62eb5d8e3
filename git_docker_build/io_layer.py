"""
I/O Layer for Git Docker Build

This module contains all container operations (build, login, push, remove)
separated from business logic. This is the "imperative shell" that
handles all side effects by invoking the docker command line client.
"""

import logging
import subprocess
from typing import List, Dict, Optional

from .exceptions import ExternalToolError

logger = logging.getLogger(__name__)


class ImageBuilder:
    """Handles all docker operations for the application."""

    def __init__(self, docker: str = "docker", dry_run: bool = False):
        """Initialize the image builder.

        Args:
            docker: Name or path of the docker executable
            dry_run: If True, don't perform actual docker calls
        """
        self.docker = docker
        self.dry_run = dry_run

    # -----------------------------------------------------------------------------
    # Command Execution
    # -----------------------------------------------------------------------------

    def _run(self, args: List[str], stdin: Optional[str] = None, capture_output: bool = False) -> str:
        """Run a docker command, raising ExternalToolError on failure.

        Args:
            args: Arguments passed to the docker executable
            stdin: Optional text written to the process stdin
            capture_output: If True, capture and return stdout

        Returns:
            Captured stdout, or an empty string
        """
        command = [self.docker, *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                input=stdin,
                check=True,
                text=True,
                capture_output=capture_output or stdin is not None,
            )
        except FileNotFoundError as e:
            raise ExternalToolError(f"Docker executable not found: {self.docker}", command=command) from e
        except subprocess.CalledProcessError as e:
            details = (e.stderr or e.stdout or "").strip() or str(e)
            raise ExternalToolError(
                f"Command failed: {' '.join(command)}\n{details}",
                command=command,
                output=details,
            ) from e

        return (result.stdout or "") if capture_output else ""

    # -----------------------------------------------------------------------------
    # Docker Operations
    # -----------------------------------------------------------------------------

    def build(
        self,
        tags: List[str],
        labels: Dict[str, str],
        build_args: List[str],
        dockerfile: str,
        context: str,
        pull: bool = False,
        force_remove_and_no_cache: bool = False
    ) -> bool:
        """Build one image carrying all tags.

        Args:
            tags: Full image references
            labels: Image labels
            build_args: Build arguments as NAME or NAME=value
            dockerfile: Path to the Dockerfile
            context: Build context path
            pull: If True, always pull newer base images
            force_remove_and_no_cache: If True, remove intermediate containers and skip the cache

        Returns:
            True if built, False if dry run
        """
        args = ["build"]
        if pull:
            args.append("--pull")
        if force_remove_and_no_cache:
            args.extend(["--force-rm", "--no-cache"])
        for key, value in labels.items():
            args.extend(["--label", f"{key}={value}"])
        for tag in tags:
            args.extend(["--tag", tag])
        for build_arg in build_args:
            args.extend(["--build-arg", build_arg])
        args.extend(["--file", dockerfile, context])

        if self.dry_run:
            print(f"[DRY RUN] Would run: {self.docker} {' '.join(args)}")
            return False

        self._run(args)
        return True

    def login(self, username: str, password: str, registry: Optional[str]) -> bool:
        """Log in to a registry. The password is passed on stdin.

        Returns:
            True if logged in, False if dry run
        """
        args = ["login", "--username", username, "--password-stdin"]
        if registry:
            args.append(registry)

        if self.dry_run:
            print(f"[DRY RUN] Would log in to {registry or 'default registry'} as {username}")
            return False

        self._run(args, stdin=password)
        return True

    def push(self, image_ref: str) -> bool:
        """Push a single image reference.

        Returns:
            True if pushed, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would push {image_ref}")
            return False

        self._run(["push", image_ref])
        return True

    def push_repository(self, repository_ref: str) -> bool:
        """Push all local tags of a repository.

        Returns:
            True if pushed, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would push all tags of {repository_ref}")
            return False

        self._run(["push", "--all-tags", repository_ref])
        return True

    def count_local_tags(self, repository_ref: str) -> int:
        """Count the locally tagged images of a repository (0 in dry run)."""
        if self.dry_run:
            return 0

        output = self._run(
            ["image", "ls", "--format", "{{.Tag}}", repository_ref],
            capture_output=True,
        )
        return len([line for line in output.splitlines() if line.strip() and line.strip() != "<none>"])

    def remove(self, image_refs: List[str]) -> bool:
        """Remove local image references.

        Returns:
            True if removed, False if dry run
        """
        if not image_refs:
            return False

        if self.dry_run:
            print(f"[DRY RUN] Would remove {', '.join(image_refs)}")
            return False

        self._run(["rmi", *image_refs])
        return True
