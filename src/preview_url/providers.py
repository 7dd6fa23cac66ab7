"""Commit-info providers.

The assembler needs a commit SHA, message and author for the deployment
record.  Two sources are supported and selected by the caller:

* `ContextCommitProvider` uses the pull request itself (title as message,
  PR author as commit author).  No I/O, cannot fail.
* `RemoteCommitProvider` fetches the head commit from the GitHub REST API
  using an explicitly supplied token.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .context import PullRequestContext
from .github import api as github_api
from .models import CommitInfo

logger = logging.getLogger(__name__)


class CommitInfoProvider(Protocol):
    def get_commit_info(self, pr: PullRequestContext) -> CommitInfo:
        ...


class ContextCommitProvider:
    """Derive commit info from the pull request payload alone."""

    def get_commit_info(self, pr: PullRequestContext) -> CommitInfo:
        return CommitInfo(sha=pr.head_sha, message=pr.title, author=pr.user)


class RemoteCommitProvider:
    """Look up the head commit on GitHub.

    Failures surface as `ProviderFailureError` from the API wrapper.
    """

    def __init__(self, token: str, repo_slug: str) -> None:
        self.token = token
        self.repo_slug = repo_slug

    def get_commit_info(self, pr: PullRequestContext) -> CommitInfo:
        logger.info("Fetching commit %s from %s", pr.head_sha, self.repo_slug)
        data = github_api.get_commit(self.token, self.repo_slug, pr.head_sha)
        commit: dict[str, Any] = data.get("commit") or {}
        return CommitInfo(
            sha=data.get("sha") or "",
            message=commit.get("message") or "",
            author=commit.get("author"),
        )
