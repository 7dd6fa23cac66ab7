"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..constants import GITHUB_TIMEOUT_S


def get_github_client(token: str) -> httpx.Client:
    """Return a configured GitHub httpx client with the Authorization header set."""
    return httpx.Client(
        headers={
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": f"vercel-preview-url/{__version__}",
        },
        timeout=GITHUB_TIMEOUT_S,
    )
