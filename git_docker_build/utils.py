"""
Utility Functions Module for Git Docker Build

This module provides various utility functions used throughout the application.

Functions:
    setup_logging: Configures application logging
    utc_timestamp: Formats the current UTC time for the build-date label
    image_reference: Composes a full image reference from its parts
    repository_name_from_url: Derives an image repository name from a remote URL
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from .config import BUILD_DATE_FORMAT

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Return ``now`` (default: the current time) as YYYY-MM-DDTHH:MM:SSZ in UTC."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(BUILD_DATE_FORMAT)


def image_reference(registry: Optional[str], repository: str, tag: Optional[str] = None) -> str:
    """Compose ``registry/repository[:tag]``, omitting the registry when empty."""
    reference = f"{registry.rstrip('/')}/{repository}" if registry else repository
    if tag:
        reference = f"{reference}:{tag}"
    return reference


def repository_name_from_url(url: Optional[str]) -> Optional[str]:
    """Return the last path component of a remote URL without ``.git``, lowercased.

    Handles both ``https://host/org/name.git`` and ``git@host:org/name.git``.
    """
    if not url:
        return None

    name = url.rstrip("/").replace(":", "/").rsplit("/", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name.lower() or None
