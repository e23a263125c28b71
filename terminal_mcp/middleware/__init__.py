"""Terminal MCP middleware components."""

from terminal_mcp.middleware.base import TerminalMiddleware
from terminal_mcp.middleware.errors import ErrorHandlingMiddleware
from terminal_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "TerminalMiddleware",
]
