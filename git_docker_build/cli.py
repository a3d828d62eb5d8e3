#!/usr/bin/env python3

"""
Docker Image Build Script for Git Repositories

Simplified CLI using the Functional Core, Imperative Shell pattern.
All business logic is in pure functions, all I/O is in the I/O layer.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import DEFAULT_REGISTRY, DEFAULT_VENDOR
from .environment import BUILD_ARGS_ENV, EnvironmentConfig, env_name
from .exceptions import ConfigurationError, ExternalToolError
from .git_operations import open_repository, read_repository_facts
from .io_layer import ImageBuilder
from .models import BuildConfig, RepositoryFacts, VersionLevel
from .plan_builder import prepare_plan
from .plan_executor import execute_plan
from .utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Options default to None so that unset options fall back to their
    environment variable.
    """
    parser = argparse.ArgumentParser(
        prog="git-docker-build",
        description="Build, tag and push a docker image from the state of a git repository.",
        epilog="Every option falls back to the environment variable shown in brackets.",
    )
    parser.add_argument("path", nargs="?", default=None, help="git repository path (default: .)")

    def flag(name, help_text):
        option = name.replace("-", "_")
        parser.add_argument(
            f"--{name}", dest=option, action="store_const", const=True, default=None,
            help=f"{help_text} [{env_name(option)}]",
        )

    def value(name, help_text, **kwargs):
        option = name.replace("-", "_")
        parser.add_argument(
            f"--{name}", dest=option, default=None, metavar=option.upper(),
            help=f"{help_text} [{env_name(option)}]", **kwargs,
        )

    parser.add_argument(
        "--build-arg", dest="build_args", action="append", default=None, metavar="NAME[=VALUE]",
        help=f"build argument, repeatable [{BUILD_ARGS_ENV}]",
    )
    value("context", "build context (default: repository path)")
    value("dockerfile", "Dockerfile path (default: CONTEXT/Dockerfile)")
    flag("latest", "also tag the image as latest")
    value("latest-branch", "tag the image as latest when built from this branch")
    value("license", "license label")
    value("maintainer", "maintainer label (default: committer)")
    value("password", "registry password")
    flag("prune", "remove the images after building, implies --force-rm and --no-cache")
    flag("pull", "always pull newer base images")
    flag("push", "push the images")
    value(
        "version-level",
        f"highest rollup tag of release versions: {', '.join(level.value for level in VersionLevel)} "
        "(default: patch)",
    )
    flag("no-commit", "do not tag the image with the commit hash")
    flag("no-branch", "do not tag the image with the branch name")
    value("repository", "image repository (default: derived from the remote URL)")
    value("registry", f"image registry (default: {DEFAULT_REGISTRY})")
    value("suffix", "suffix appended to every tag")
    value("username", "registry user name")
    value("url", "url label (default: remote URL)")
    value("version", "version to tag the image with")
    value("vendor", f"vendor label (default: {DEFAULT_VENDOR})")
    flag("dry-run", "print the plan and docker commands without running them")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(facts: RepositoryFacts, config: BuildConfig, builder: ImageBuilder) -> int:
    """Plan and execute the build.

    Returns:
        Process exit status
    """
    try:
        plan = prepare_plan(facts, config)

        print(f"Building image: {plan.repository_reference}")
        for image_ref in plan.image_references:
            print(f"  - {image_ref}")
        if plan.dry_run:
            print("\nDry run plan:")
            print(plan.to_yaml())

        result = execute_plan(plan, builder)
    except (ConfigurationError, ExternalToolError) as e:
        print(f"Error: {e}")
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}")
    if result.pushed:
        print(f"Pushed {len(result.pushed)} image(s)")
    print("Image build process completed")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point - Clean planning/execution pipeline."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        # Step 1: Parse options and environment
        overrides = {k: v for k, v in vars(args).items() if k != "verbose"}
        env_config = EnvironmentConfig.from_env(os.environ, overrides)

        # Step 2: Validate configuration
        errors = env_config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        # Step 3: Read repository facts
        repo = open_repository(env_config.path)
        facts = read_repository_facts(repo)
        config = env_config.to_build_config(facts)

        # Step 4: Plan and execute
        builder = ImageBuilder(dry_run=config.dry_run)
        status = run(facts, config, builder)
    except (ConfigurationError, ExternalToolError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
