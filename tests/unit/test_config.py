"""Tests for action configuration loading."""

from __future__ import annotations

import pytest

from preview_url.config import ActionConfig, get_input
from preview_url.errors import InvalidInputError


class TestGetInput:
    def test_hyphenated_name(self) -> None:
        assert get_input("project-name", {"INPUT_PROJECT-NAME": " site "}) == "site"

    def test_underscore_fallback(self) -> None:
        assert get_input("team-slug", {"INPUT_TEAM_SLUG": "acme"}) == "acme"

    def test_missing_is_empty(self) -> None:
        assert get_input("team-slug", {}) == ""


class TestActionConfig:
    def test_loads_required_and_defaults(self, action_env) -> None:
        config = ActionConfig.load_from_env(action_env)

        assert config.project_name == "site"
        assert config.team_slug == "acme"
        assert config.commit_source == "context"
        assert config.github_token is None
        assert config.repository == "acme/site"
        assert config.log_level == "INFO"

    def test_missing_both_inputs_named(self) -> None:
        with pytest.raises(InvalidInputError, match="project-name, team-slug"):
            ActionConfig.load_from_env({})

    def test_blank_input_counts_as_missing(self, action_env) -> None:
        action_env["INPUT_TEAM-SLUG"] = "   "
        with pytest.raises(InvalidInputError, match="team-slug"):
            ActionConfig.load_from_env(action_env)

    def test_invalid_commit_source(self, action_env) -> None:
        action_env["INPUT_COMMIT-SOURCE"] = "vercel"
        with pytest.raises(InvalidInputError, match="commit-source"):
            ActionConfig.load_from_env(action_env)

    def test_token_input_preferred(self, action_env) -> None:
        action_env["GITHUB_TOKEN"] = "env-token"
        action_env["INPUT_GITHUB-TOKEN"] = "input-token"
        assert ActionConfig.load_from_env(action_env).github_token == "input-token"

    def test_token_from_environment(self, action_env) -> None:
        action_env["GITHUB_TOKEN"] = "env-token"
        assert ActionConfig.load_from_env(action_env).github_token == "env-token"

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ActionConfig.load_from_env({"INPUT_PROJECT-NAME": "site"})
