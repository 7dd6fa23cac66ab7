"""Tool module exports for the preview URL MCP server.

Usage:

    from preview_url.tools import deployment_tools
    deployment_tools.build_deployment_url(...)

The server imports these modules and dispatches requests accordingly.
"""

from . import deployment_tools  # noqa: F401

__all__ = ["deployment_tools"]
