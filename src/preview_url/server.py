"""MCP stdio server entrypoint for the preview URL helper.

The server runs over standard input/output using the Model Context Protocol
and registers the deployment URL tools so agents can predict preview URLs
without a workflow run.

This is an MCP-only server - no JSON fallback protocol is supported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import DEFAULT_LOG_LEVEL
from .telemetry import configure_logging
from .tools import deployment_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns a JSON-serializable
    dictionary.
    """
    return {
        "sanitize_branch_name": deployment_tools.sanitize_branch_name,
        "build_deployment_url": deployment_tools.build_deployment_url,
        "construct_deployment_info": deployment_tools.construct_deployment_info,
    }


def build_server() -> FastMCP:
    """Create the MCP server with every tool registered."""
    mcp = FastMCP("vercel-preview-url")
    for name, func in build_tools_dispatch().items():
        mcp.add_tool(func, name=name)
    return mcp


def main() -> None:
    """Entrypoint for the preview URL MCP server."""
    # stdout is used for MCP protocol
    configure_logging(DEFAULT_LOG_LEVEL)
    logger = logging.getLogger(__name__)
    logger.info("Starting preview URL MCP server")

    mcp = build_server()
    logger.info("Registered %d tools", len(build_tools_dispatch()))

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
