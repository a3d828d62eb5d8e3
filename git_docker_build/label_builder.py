"""
Label Builder Module

Pure functions building the image metadata labels of a build.
Every conditional label is present only when its source is non-empty.
"""

from typing import Dict, Optional

from .config import (
    LABEL_SCHEMA_VERSION,
    LABEL_SCHEMA_VERSION_VALUE,
    LABEL_BUILD_DATE,
    LABEL_VENDOR,
    LABEL_LICENSE,
    LABEL_VCS_URL,
    LABEL_MAINTAINER,
    LABEL_URL,
    LABEL_VCS_REF,
    LABEL_VERSION,
)
from .models import BuildConfig, RepositoryFacts
from .utils import utc_timestamp


def build_labels(
    facts: RepositoryFacts,
    config: BuildConfig,
    build_date: Optional[str] = None
) -> Dict[str, str]:
    """
    Build the image labels.

    Args:
        facts: Repository facts of the current checkout
        config: Build configuration
        build_date: Build timestamp; the current UTC time when omitted

    Returns:
        Dictionary mapping label keys to values
    """
    labels = {
        LABEL_SCHEMA_VERSION: LABEL_SCHEMA_VERSION_VALUE,
        LABEL_BUILD_DATE: build_date or utc_timestamp(),
    }

    _set(labels, LABEL_VENDOR, config.vendor)
    _set(labels, LABEL_LICENSE, config.license)
    _set(labels, LABEL_VCS_URL, facts.remote_url)
    _set(labels, LABEL_MAINTAINER, config.maintainer, facts.committer)
    _set(labels, LABEL_URL, config.url, facts.remote_url)
    _set(labels, LABEL_VCS_REF, facts.commit_full)
    _set(labels, LABEL_VERSION, config.version, facts.exact_tag)

    return labels


def _set(labels: Dict[str, str], key: str, *candidates: Optional[str]) -> None:
    """Set ``key`` to the first non-empty candidate, if any."""
    for value in candidates:
        if value:
            labels[key] = value
            return
