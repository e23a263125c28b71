"""Data models for Terminal MCP."""

from terminal_mcp.models.command import (
    UNKNOWN_RETURN_CODE,
    CommandResult,
    ExecutionFailure,
    SpawnOutput,
)

__all__ = [
    "UNKNOWN_RETURN_CODE",
    "CommandResult",
    "ExecutionFailure",
    "SpawnOutput",
]
