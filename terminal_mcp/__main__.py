"""Entry point for terminal_mcp server."""

import logging

from terminal_mcp.dependencies import Dependencies
from terminal_mcp.server import configure_logging, create_server

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the MCP server with configured transport."""
    deps = Dependencies.create()
    settings = deps.settings
    configure_logging(settings)

    server = create_server(deps)

    if settings.transport == "http":
        logger.info(
            "Starting Terminal MCP server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        server.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )
    else:
        logger.info("Starting Terminal MCP server (transport=stdio)")
        server.run(transport="stdio")


if __name__ == "__main__":
    run_server()
