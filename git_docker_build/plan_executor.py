"""Plan executor - executes a prepared build plan."""

import logging

from .exceptions import ExternalToolError
from .io_layer import ImageBuilder
from .models import BuildPlan, ExecutionResult

logger = logging.getLogger(__name__)


def execute_plan(plan: BuildPlan, builder: ImageBuilder) -> ExecutionResult:
    """
    Execute a prepared plan.

    Login, build and push failures raise ExternalToolError and abort the
    run. Removing the images afterwards is best-effort: a failure is
    reported as a warning and leaves the result successful.
    """
    result = ExecutionResult(success=True, dry_run=plan.dry_run)

    _login(plan, builder)

    logger.info(f"Building {plan.repository_reference} from {plan.dockerfile}")
    if builder.build(
        tags=plan.image_references,
        labels=plan.labels,
        build_args=plan.build_args,
        dockerfile=plan.dockerfile,
        context=plan.context,
        pull=plan.pull,
        force_remove_and_no_cache=plan.no_cache,
    ):
        result.built.extend(plan.image_references)

    if plan.push:
        _push(plan, builder, result)

    if plan.prune:
        _prune(plan, builder, result)

    return result


def _login(plan: BuildPlan, builder: ImageBuilder):
    """Log in to the registry when both credentials are present."""
    if not plan.login:
        logger.debug("No registry credentials configured, skipping login")
        return

    logger.info(f"Logging in to {plan.registry} as {plan.username}")
    builder.login(plan.username, plan.password, plan.registry)


def _push(plan: BuildPlan, builder: ImageBuilder, result: ExecutionResult):
    """Push all image references.

    When the local repository carries exactly the planned tags, a single
    repository push replaces the individual pushes. Only pushes that
    actually happened are recorded, so a dry run records none.
    """
    try:
        local_tags = builder.count_local_tags(plan.repository_reference)
    except ExternalToolError as e:
        logger.warning(f"Failed to count local tags of {plan.repository_reference}, pushing individually: {e}")
        local_tags = None

    if local_tags == len(plan.image_references):
        logger.info(f"Pushing all {local_tags} tag(s) of {plan.repository_reference}")
        if builder.push_repository(plan.repository_reference):
            result.pushed.extend(plan.image_references)
        return

    for image_ref in plan.image_references:
        logger.info(f"Pushing {image_ref}")
        if builder.push(image_ref):
            result.pushed.append(image_ref)


def _prune(plan: BuildPlan, builder: ImageBuilder, result: ExecutionResult):
    """Remove the built images."""
    try:
        if builder.remove(plan.image_references):
            result.removed.extend(plan.image_references)
    except ExternalToolError as e:
        logger.warning(f"Failed to remove built images: {e}")
        result.warnings.append(f"Failed to remove built images: {e}")
