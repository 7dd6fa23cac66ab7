"""GitHub event payload loading.

The Actions runner writes the triggering webhook payload to the file named by
``GITHUB_EVENT_PATH``.  Only the pull request fields needed to name a preview
deployment are kept.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import InvalidInputError


@dataclass(frozen=True)
class PullRequestContext:
    head_ref: str
    head_sha: str
    title: str
    user: Any = None
    number: int | None = None

    @classmethod
    def from_payload(cls, pr: Mapping[str, Any]) -> PullRequestContext:
        """Build a context from a ``pull_request`` webhook object.

        Missing fields default to empty values rather than failing; GitHub
        always sends them for real pull request events.
        """
        head = pr.get("head")
        if not isinstance(head, Mapping):
            head = {}
        return cls(
            head_ref=head.get("ref") or "",
            head_sha=head.get("sha") or "",
            title=pr.get("title") or "",
            user=copy.deepcopy(pr.get("user")),
            number=pr.get("number"),
        )


@dataclass(frozen=True)
class EventContext:
    event_name: str | None
    repository: str | None
    pull_request: PullRequestContext | None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        event_name: str | None = None,
        repository: str | None = None,
    ) -> EventContext:
        """Build an event context from a decoded webhook payload.

        ``repository`` falls back to ``repository.full_name`` in the payload.
        """
        pr = payload.get("pull_request")
        pull_request = PullRequestContext.from_payload(pr) if isinstance(pr, Mapping) else None

        if not repository:
            repo = payload.get("repository")
            if isinstance(repo, Mapping):
                repository = repo.get("full_name")

        return cls(event_name=event_name, repository=repository, pull_request=pull_request)


def load_event(
    event_path: str | Path | None,
    event_name: str | None = None,
    repository: str | None = None,
) -> EventContext:
    """Read and decode the event payload at ``event_path``.

    Raises `InvalidInputError` if the path is unset, unreadable or does not
    contain a JSON object.
    """
    if not event_path:
        raise InvalidInputError("GITHUB_EVENT_PATH is not set; cannot read the triggering event")

    path = Path(event_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidInputError(f"Cannot read event payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Event payload {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise InvalidInputError(f"Event payload {path} is not a JSON object")

    return EventContext.from_payload(payload, event_name=event_name, repository=repository)
