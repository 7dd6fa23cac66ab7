"""Configuration loading for the preview URL action.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates an `ActionConfig` object.  Action inputs are
read the way the GitHub Actions runner exposes them: ``with: project-name``
becomes ``INPUT_PROJECT-NAME`` in the environment.

Required inputs:
- project-name
- team-slug

Optional inputs with defaults:
- commit-source (default: 'context')
- github-token (default: GITHUB_TOKEN)

Runner environment:
- GITHUB_EVENT_PATH, GITHUB_EVENT_NAME, GITHUB_REPOSITORY, GITHUB_OUTPUT
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import COMMIT_SOURCE_CONTEXT, COMMIT_SOURCES, DEFAULT_LOG_LEVEL
from .errors import InvalidInputError


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the stripped value of an action input, or ``""`` if unset.

    The runner keeps hyphens in the variable name, but shells cannot export
    such names, so the underscore spelling is accepted too.
    """
    env = os.environ if env is None else env
    key = f"INPUT_{name.upper()}"
    value = env.get(key)
    if value is None:
        value = env.get(key.replace("-", "_"), "")
    return value.strip()


@dataclass(frozen=True)
class ActionConfig:
    """Configuration values for one action run."""

    project_name: str
    team_slug: str
    commit_source: str
    github_token: str | None
    event_path: str | None
    event_name: str | None
    repository: str | None
    output_path: str | None
    log_level: str

    @classmethod
    def load_from_env(cls, env: Mapping[str, str] | None = None) -> ActionConfig:
        """Load configuration from action inputs and runner variables.

        The `.env` file is loaded if present (only when reading the real
        process environment).  Raises `InvalidInputError` if required inputs
        are missing or ``commit-source`` is not recognised.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        project_name = get_input("project-name", env)
        team_slug = get_input("team-slug", env)

        missing = []
        if not project_name:
            missing.append("project-name")
        if not team_slug:
            missing.append("team-slug")
        if missing:
            raise InvalidInputError(f"Missing required inputs: {', '.join(missing)}")

        commit_source = (get_input("commit-source", env) or COMMIT_SOURCE_CONTEXT).lower()
        if commit_source not in COMMIT_SOURCES:
            raise InvalidInputError(
                f"Invalid commit-source '{commit_source}'; expected one of: {', '.join(COMMIT_SOURCES)}"
            )

        # Explicit input wins over the runner-provided token
        github_token = get_input("github-token", env) or env.get("GITHUB_TOKEN") or None

        return cls(
            project_name=project_name,
            team_slug=team_slug,
            commit_source=commit_source,
            github_token=github_token,
            event_path=env.get("GITHUB_EVENT_PATH") or None,
            event_name=env.get("GITHUB_EVENT_NAME") or None,
            repository=env.get("GITHUB_REPOSITORY") or None,
            output_path=env.get("GITHUB_OUTPUT") or None,
            log_level=env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
