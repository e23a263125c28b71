"""MCP tools for Terminal MCP."""

from terminal_mcp.tools.run_command import (
    RUN_COMMAND_DESCRIPTION,
    make_run_command,
    register_run_command,
)

__all__ = ["RUN_COMMAND_DESCRIPTION", "make_run_command", "register_run_command"]
