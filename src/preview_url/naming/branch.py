"""Branch naming conventions used by Vercel preview deployments.

Vercel names branch previews ``{project}-git-{branch}-{team}.vercel.app``
where ``branch`` is a URL-safe rendition of the git branch name.  These
helpers reproduce that naming without calling the Vercel API.
"""

from __future__ import annotations

import re

from ..constants import BRANCH_REF_PREFIX, DEPLOYMENT_URL_TEMPLATE

_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")


def sanitize_branch_name(branch_name: str | None) -> str:
    """Return ``branch_name`` normalised into a URL-safe token.

    Strips a leading ``refs/heads/``, lower-cases, replaces anything outside
    ``[a-z0-9-]`` with a hyphen, collapses hyphen runs and trims hyphens at
    both ends.  Never raises; empty or ``None`` input gives ``""``.
    """
    if not branch_name:
        return ""
    if branch_name.startswith(BRANCH_REF_PREFIX):
        branch_name = branch_name[len(BRANCH_REF_PREFIX):]
    sanitized = _INVALID_CHARS.sub("-", branch_name.lower())
    sanitized = _HYPHEN_RUNS.sub("-", sanitized)
    return sanitized.strip("-")


def build_deployment_url(project_name: str, branch_name: str | None, team_slug: str) -> str:
    """Return the preview deployment URL for a branch.

    ``project_name`` and ``team_slug`` are used verbatim.
    """
    return DEPLOYMENT_URL_TEMPLATE.format(
        project_name=project_name,
        branch=sanitize_branch_name(branch_name),
        team_slug=team_slug,
    )
