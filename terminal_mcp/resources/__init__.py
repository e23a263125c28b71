"""MCP resources for Terminal MCP."""

from terminal_mcp.resources.readme import (
    README_URI,
    read_readme,
    register_readme_resource,
)

__all__ = ["README_URI", "read_readme", "register_readme_resource"]
