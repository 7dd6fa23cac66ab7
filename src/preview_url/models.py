"""Value objects produced by the deployment info assembler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CommitInfo:
    """Commit details attached to a constructed deployment."""

    sha: str
    message: str
    author: Any = None


@dataclass(frozen=True)
class DeploymentInfo:
    """Description of the hypothetical preview deployment."""

    url: str
    ref: str
    state: str
    commit_sha: str
    commit_message: str
    commit_author: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation published as ``deployment-info``."""
        return {
            "url": self.url,
            "ref": self.ref,
            "state": self.state,
            "commitSha": self.commit_sha,
            "commitMessage": self.commit_message,
            "commitAuthor": self.commit_author,
        }


@dataclass(frozen=True)
class Result:
    """Outcome of one assembler call."""

    should_notify: bool
    deployment_info: DeploymentInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "shouldNotify": self.should_notify,
            "deploymentInfo": self.deployment_info.to_dict(),
        }
