"""GitHub API integration."""

from .api import get_commit
from .auth import get_github_client

__all__ = [
    "get_github_client",
    "get_commit",
]
