"""Terminal MCP FastMCP server.

Wires the MCP server together: logging, middleware, the run_command tool,
the optional mcpreadme resource and the HTTP health route. Command
execution lives in services/.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from terminal_mcp.config import Settings
from terminal_mcp.dependencies import Dependencies
from terminal_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from terminal_mcp.resources import register_readme_resource
from terminal_mcp.tools import register_run_command
from terminal_mcp.utils.console import ConsoleFormatter

logger = logging.getLogger(__name__)

NOISY_LOGGERS = (
    "fastmcp",
    "mcp",
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "starlette",
    "anyio",
)


def configure_logging(settings: Settings) -> None:
    """Configure colorful stderr logging for the terminal_mcp package.

    Logs go to stderr so they never interleave with the stdio transport.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("terminal_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConsoleFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log server startup and shutdown.

    Yields:
        Dict with the server name
    """
    logger.info("Terminal MCP server %r ready to accept connections", server.name)
    try:
        yield {"server_name": server.name}
    finally:
        logger.info("Terminal MCP server shutting down")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging.

    First added is innermost, so logging sees errors after they are counted.
    """
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server(deps: Dependencies) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        deps: Settings and executor shared by all handlers

    Returns:
        Configured FastMCP server instance
    """
    settings = deps.settings
    server = FastMCP(settings.server_name, lifespan=app_lifespan)

    configure_middleware(server, settings)

    register_run_command(
        server,
        deps.executor,
        describe=settings.describe_tools,
    )

    if settings.readme_enabled:
        register_readme_resource(server, settings.readme_path)
        logger.debug("Registered mcpreadme resource for %s", settings.readme_path)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server
