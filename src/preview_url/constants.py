"""Global constants for the preview URL helper.

These values serve as defaults for configuration and URL construction.
Override the environment-backed ones via environment variables rather than
editing this module.
"""

import os

# URL construction
DEPLOYMENT_URL_TEMPLATE = "https://{project_name}-git-{branch}-{team_slug}.vercel.app"
BRANCH_REF_PREFIX = "refs/heads/"
DEPLOYMENT_STATE = "constructed"
SHORT_SHA_LENGTH = 7

# Commit info sources
COMMIT_SOURCE_CONTEXT = "context"
COMMIT_SOURCE_API = "api"
COMMIT_SOURCES = (COMMIT_SOURCE_CONTEXT, COMMIT_SOURCE_API)

# Action outputs
OUTPUT_SHOULD_NOTIFY = "should-notify"
OUTPUT_DEPLOYMENT_INFO = "deployment-info"

# GitHub
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_TIMEOUT_S = float(os.environ.get("GITHUB_TIMEOUT_S", 10.0))

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
