"""GitHub Actions entrypoint.

Reads the action inputs and the triggering pull request event, constructs
the preview deployment record and publishes the ``should-notify`` and
``deployment-info`` outputs.  Every failure is reported through a single
``Action failed: ...`` message and a non-zero exit status; no outputs are
written in that case.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping

from .assembler import construct_deployment_info
from .config import ActionConfig
from .constants import (
    COMMIT_SOURCE_API,
    DEFAULT_LOG_LEVEL,
    OUTPUT_DEPLOYMENT_INFO,
    OUTPUT_SHOULD_NOTIFY,
)
from .context import load_event
from .errors import InvalidInputError, PreviewUrlError
from .outputs import error_annotation, set_outputs
from .policy import redact_secrets
from .providers import CommitInfoProvider, ContextCommitProvider, RemoteCommitProvider
from .telemetry import configure_logging

logger = logging.getLogger(__name__)


def select_provider(config: ActionConfig, repository: str | None) -> CommitInfoProvider:
    """Return the commit-info provider requested by ``commit-source``."""
    if config.commit_source != COMMIT_SOURCE_API:
        return ContextCommitProvider()

    missing = []
    if not config.github_token:
        missing.append("github-token (or GITHUB_TOKEN)")
    if not repository:
        missing.append("GITHUB_REPOSITORY")
    if missing:
        raise InvalidInputError(f"commit-source 'api' requires: {', '.join(missing)}")
    return RemoteCommitProvider(token=config.github_token, repo_slug=repository)


def run(config: ActionConfig) -> None:
    """Construct the deployment info for ``config`` and publish the outputs."""
    logger.info(
        "Constructing deployment URL for project: %s, team: %s",
        config.project_name,
        config.team_slug,
    )

    event = load_event(config.event_path, event_name=config.event_name, repository=config.repository)
    provider = select_provider(config, event.repository)
    result = construct_deployment_info(event, config.project_name, config.team_slug, provider)

    # Serialize everything before publishing anything
    outputs = {
        OUTPUT_SHOULD_NOTIFY: str(result.should_notify).lower(),
        OUTPUT_DEPLOYMENT_INFO: json.dumps(result.deployment_info.to_dict(), separators=(",", ":")),
    }
    set_outputs(outputs, config.output_path)

    logger.info("Deployment URL: %s", result.deployment_info.url)
    logger.info("Action completed successfully!")


def main(env: Mapping[str, str] | None = None) -> int:
    """Run the action and return the process exit status."""
    token: str | None = None
    try:
        config = ActionConfig.load_from_env(env)
        token = config.github_token
        configure_logging(config.log_level)
        run(config)
    except Exception as exc:
        # Config errors happen before logging is configured
        configure_logging(DEFAULT_LOG_LEVEL)
        detail = exc.message if isinstance(exc, PreviewUrlError) else str(exc)
        message = redact_secrets(f"Action failed: {detail}", [token])
        logger.error(message)
        error_annotation(message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
