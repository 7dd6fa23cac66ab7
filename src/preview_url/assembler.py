"""Deployment info assembly.

Combines the branch naming helpers with commit details from a
`CommitInfoProvider` into the `Result` published by the action.
"""

from __future__ import annotations

import copy
import logging

from .constants import DEPLOYMENT_STATE, SHORT_SHA_LENGTH
from .context import EventContext
from .errors import MissingContextError
from .models import DeploymentInfo, Result
from .naming import build_deployment_url
from .providers import CommitInfoProvider, ContextCommitProvider

logger = logging.getLogger(__name__)


def construct_deployment_info(
    context: EventContext,
    project_name: str,
    team_slug: str,
    provider: CommitInfoProvider | None = None,
) -> Result:
    """Construct the preview deployment record for the pull request in ``context``.

    ``provider`` defaults to `ContextCommitProvider`, which performs no I/O.
    Raises `MissingContextError` if the event has no pull request; errors
    raised by ``provider`` propagate unchanged.

    ``should_notify`` is always ``True`` once a pull request is present.  The
    author is copied so results never share mutable state with each other.
    """
    pr = context.pull_request
    if pr is None:
        raise MissingContextError(
            "No PR found in context. This action must be run in a pull_request event."
        )

    branch_name = pr.head_ref
    url = build_deployment_url(project_name, branch_name, team_slug)
    logger.debug("Built %s for branch %r", url, branch_name)

    if provider is None:
        provider = ContextCommitProvider()
    commit = provider.get_commit_info(pr)

    return Result(
        should_notify=True,
        deployment_info=DeploymentInfo(
            url=url,
            ref=branch_name,
            state=DEPLOYMENT_STATE,
            commit_sha=(commit.sha or "")[:SHORT_SHA_LENGTH],
            commit_message=(commit.message or "").split("\n", 1)[0],
            commit_author=copy.deepcopy(commit.author),
        ),
    )
