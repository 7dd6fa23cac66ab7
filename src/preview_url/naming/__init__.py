"""Branch sanitization and deployment URL naming."""

from .branch import build_deployment_url, sanitize_branch_name

__all__ = ["sanitize_branch_name", "build_deployment_url"]
