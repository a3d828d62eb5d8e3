"""Plan builder - creates a build plan from repository facts and configuration."""

import logging
from typing import Optional

from .exceptions import ConfigurationError
from .label_builder import build_labels
from .models import BuildConfig, BuildPlan, RepositoryFacts
from .tag_planner import plan_tags
from .utils import image_reference

logger = logging.getLogger(__name__)


def prepare_plan(
    facts: RepositoryFacts,
    config: BuildConfig,
    build_date: Optional[str] = None
) -> BuildPlan:
    """
    Prepare a complete build plan.

    This function determines tags, image references and labels,
    but doesn't invoke any docker operation.

    Args:
        facts: Repository facts of the current checkout
        config: Build configuration
        build_date: Optional build timestamp (defaults to now)

    Raises:
        ConfigurationError: If no tag or repository could be determined
    """
    if not config.repository:
        raise ConfigurationError("No image repository configured")

    tags = plan_tags(facts, config)
    if not tags:
        raise ConfigurationError(
            "Could not determine an image name: all tag sources are disabled or empty"
        )

    logger.info(f"Planned {len(tags)} tag(s): {', '.join(tags)}")

    return BuildPlan(
        tags=tags,
        image_references=[image_reference(config.registry, config.repository, tag) for tag in tags],
        repository_reference=image_reference(config.registry, config.repository),
        labels=build_labels(facts, config, build_date),
        build_args=list(config.build_args),
        dockerfile=config.dockerfile or "Dockerfile",
        context=config.context,
        pull=config.pull,
        no_cache=config.prune,
        push=config.push,
        prune=config.prune,
        registry=config.registry,
        username=config.username,
        password=config.password,
        dry_run=config.dry_run,
    )
