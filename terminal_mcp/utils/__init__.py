"""Utility helpers for Terminal MCP."""

from terminal_mcp.utils.console import ConsoleFormatter

__all__ = ["ConsoleFormatter"]
