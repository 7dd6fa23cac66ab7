"""Pytest configuration and fixtures for the preview URL tests.

Action tests pass an explicit environment mapping to the entrypoint, so the
real process environment (and any `.env` file) never leaks into them.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def pr_payload() -> dict[str, object]:
    """A minimal ``pull_request`` webhook object."""
    return {
        "number": 7,
        "head": {"ref": "refs/heads/fix-bug", "sha": "abcdef1234567890"},
        "title": "Fix the bug\nmore detail",
        "user": {"login": "alice"},
    }


@pytest.fixture
def event_file(tmp_path: Path, pr_payload):
    """Write a pull_request event payload and return its path."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps({"pull_request": pr_payload, "repository": {"full_name": "acme/site"}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def action_env(tmp_path: Path, event_file) -> dict[str, str]:
    """Environment as the Actions runner would provide it."""
    output = tmp_path / "github_output"
    output.touch()
    return {
        "INPUT_PROJECT-NAME": "site",
        "INPUT_TEAM-SLUG": "acme",
        "GITHUB_EVENT_PATH": str(event_file),
        "GITHUB_EVENT_NAME": "pull_request",
        "GITHUB_REPOSITORY": "acme/site",
        "GITHUB_OUTPUT": str(output),
        "LOG_LEVEL": "INFO",
    }


@pytest.fixture
def mock_github(mocker):
    """Patch the GitHub client factory and return the mocked client."""
    mock_client = mocker.MagicMock()
    mock_client.__enter__ = mocker.MagicMock(return_value=mock_client)
    mock_client.__exit__ = mocker.MagicMock(return_value=False)
    mocker.patch("preview_url.github.api.get_github_client", return_value=mock_client)
    return mock_client


def _parse_outputs(path: str | Path) -> dict[str, str]:
    outputs: dict[str, str] = {}
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        end = lines.index(delimiter, i + 1)
        outputs[name] = "\n".join(lines[i + 1:end])
        i = end + 1
    return outputs


@pytest.fixture
def read_outputs():
    """Return a parser for GITHUB_OUTPUT files written with heredoc delimiters."""
    return _parse_outputs
