"""mcpreadme resource: serve a local markdown file."""

import logging
from pathlib import Path

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

README_URI = "file:///mcpreadme"


def read_readme(path: Path) -> str:
    """Read the readme file.

    Args:
        path: Local file to read

    Returns:
        File contents, or an error message if it cannot be read
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return f"Error reading {path.name}: {e}"


def register_readme_resource(server: FastMCP, path: Path) -> None:
    """Register the mcpreadme resource backed by path."""

    async def mcpreadme() -> str:
        return read_readme(path)

    server.resource(
        uri=README_URI,
        name="mcpreadme",
        description=f"Contents of {path}",
        mime_type="text/markdown",
    )(mcpreadme)
