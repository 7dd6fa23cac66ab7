"""GitHub REST API wrapper."""

from __future__ import annotations

import logging

import httpx

from ..constants import GITHUB_API_URL
from ..errors import ProviderFailureError
from .auth import get_github_client

logger = logging.getLogger(__name__)


def _github_request(
    token: str,
    method: str,
    url: str,
    *,
    params: dict[str, object] | None = None,
) -> object:
    """Perform an HTTP request against the GitHub API.

    This helper wraps ``httpx`` to provide a default timeout, GitHub client
    headers and basic error handling.  Any transport error or non-2xx
    response is raised as `ProviderFailureError`.  There is no retry.
    """
    if not url.startswith(f"{GITHUB_API_URL}/"):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    try:
        with get_github_client(token) as client:
            resp = client.request(method, url, params=params)
    except httpx.HTTPError as exc:
        logger.error("GitHub API request failed: %s", exc)
        raise ProviderFailureError(f"GitHub API request failed: {exc}") from exc

    if 200 <= resp.status_code < 300:
        try:
            return resp.json()
        except ValueError as exc:
            raise ProviderFailureError(f"GitHub API returned invalid JSON for {url}") from exc

    logger.error("GitHub API error %s for %s", resp.status_code, url)
    raise ProviderFailureError(f"GitHub API error {resp.status_code}: {resp.text}")


def get_commit(token: str, repo_slug: str, ref: str) -> dict[str, object]:
    """Retrieve a single commit by SHA (or any ref GitHub resolves).

    Returns the raw commit resource; the interesting parts are ``sha`` and
    the nested ``commit.message`` / ``commit.author``.
    """
    url = f"{GITHUB_API_URL}/repos/{repo_slug}/commits/{ref}"
    data = _github_request(token, "GET", url)
    if not isinstance(data, dict):
        raise ProviderFailureError(f"Unexpected commit payload for {repo_slug}@{ref}")
    return data
