"""Deployment URL tool implementations.

Thin wrappers around the naming helpers and the assembler that accept and
return JSON-serializable values.  The ``api`` commit source reads
``GITHUB_TOKEN`` from the server's environment here, at the tool boundary,
and injects it into the provider.
"""

from __future__ import annotations

import os
from typing import Any

from .. import naming
from ..assembler import construct_deployment_info as _construct
from ..constants import COMMIT_SOURCE_API, COMMIT_SOURCE_CONTEXT, COMMIT_SOURCES
from ..context import EventContext
from ..errors import InvalidInputError
from ..providers import CommitInfoProvider, ContextCommitProvider, RemoteCommitProvider


def sanitize_branch_name(branch_name: str) -> dict[str, str]:
    """Return the URL-safe form of a git branch name."""
    return {"branch": naming.sanitize_branch_name(branch_name)}


def build_deployment_url(project_name: str, branch_name: str, team_slug: str) -> dict[str, str]:
    """Return the Vercel preview URL for a branch of a project."""
    return {"url": naming.build_deployment_url(project_name, branch_name, team_slug)}


def construct_deployment_info(
    project_name: str,
    team_slug: str,
    pull_request: dict[str, Any] | None = None,
    repository: str | None = None,
    commit_source: str = COMMIT_SOURCE_CONTEXT,
) -> dict[str, Any]:
    """Construct the deployment record for a pull request webhook object.

    ``pull_request`` is the ``pull_request`` object of a GitHub webhook
    payload.  With ``commit_source="api"`` the head commit is fetched from
    ``repository`` using ``GITHUB_TOKEN``.
    """
    if not project_name or not team_slug:
        raise InvalidInputError("project_name and team_slug are required")
    if commit_source not in COMMIT_SOURCES:
        raise InvalidInputError(f"Invalid commit_source '{commit_source}'")

    payload: dict[str, Any] = {}
    if pull_request is not None:
        payload["pull_request"] = pull_request
    event = EventContext.from_payload(payload, event_name="pull_request", repository=repository)

    provider: CommitInfoProvider = ContextCommitProvider()
    if commit_source == COMMIT_SOURCE_API:
        token = os.environ.get("GITHUB_TOKEN")
        if not token or not repository:
            raise InvalidInputError("commit_source 'api' requires GITHUB_TOKEN and repository")
        provider = RemoteCommitProvider(token=token, repo_slug=repository)

    return _construct(event, project_name, team_slug, provider).to_dict()
