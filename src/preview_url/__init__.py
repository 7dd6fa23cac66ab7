"""Top‑level package for the Vercel preview URL helper.

This package derives a predictable preview-deployment URL for a pull request
from branch-name conventions, without talking to Vercel.  It ships a GitHub
Actions entrypoint and a tools-only MCP server.  See `README.md` for more
information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
