"""Services for Terminal MCP."""

from terminal_mcp.services.executor import CommandExecutor, ShellSpawner

__all__ = ["CommandExecutor", "ShellSpawner"]
