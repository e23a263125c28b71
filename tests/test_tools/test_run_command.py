"""Tests for the run_command tool over an in-memory MCP client."""

import json
from unittest.mock import AsyncMock

import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from terminal_mcp.models import CommandResult
from terminal_mcp.services.executor import CommandExecutor
from terminal_mcp.tools import (
    RUN_COMMAND_DESCRIPTION,
    make_run_command,
    register_run_command,
)


def _server(describe: bool = True) -> FastMCP:
    server = FastMCP("test")
    register_run_command(server, CommandExecutor(), describe=describe)
    return server


@pytest.mark.asyncio
async def test_handler_returns_result_json() -> None:
    """The bound handler returns the executor result as JSON text."""
    executor = AsyncMock()
    executor.execute.return_value = CommandResult("x", "", 0)
    handler = make_run_command(executor)

    text = await handler("echo x")

    executor.execute.assert_awaited_once_with("echo x")
    assert json.loads(text) == {"stdout": "x", "stderr": "", "return_code": 0}


@pytest.mark.asyncio
async def test_call_tool_echo() -> None:
    """run_command returns one text item with the JSON payload."""
    async with Client(_server()) as client:
        result = await client.call_tool("run_command", {"command": "echo hello"})

    assert len(result.content) == 1
    assert json.loads(result.content[0].text) == {
        "stdout": "hello\n",
        "stderr": "",
        "return_code": 0,
    }


@pytest.mark.asyncio
async def test_call_tool_failure_is_not_a_tool_error() -> None:
    """A failing command is a normal response, not an MCP error."""
    async with Client(_server()) as client:
        result = await client.call_tool(
            "run_command", {"command": "nonexistent_binary_xyz"}
        )

    assert not result.is_error
    payload = json.loads(result.content[0].text)
    assert list(payload) == ["stdout", "stderr", "return_code"]
    assert payload["stdout"] == ""
    assert payload["stderr"].startswith("Error executing command: ")
    assert payload["return_code"] != 0


@pytest.mark.asyncio
async def test_missing_command_argument_is_rejected() -> None:
    """The command argument is required."""
    async with Client(_server()) as client:
        with pytest.raises(ToolError):
            await client.call_tool("run_command", {})


@pytest.mark.asyncio
async def test_tool_schema_and_description() -> None:
    """The tool advertises a required string command and its description."""
    async with Client(_server()) as client:
        tools = await client.list_tools()

    tool = next(t for t in tools if t.name == "run_command")
    assert tool.description == RUN_COMMAND_DESCRIPTION
    assert tool.inputSchema["required"] == ["command"]
    assert tool.inputSchema["properties"]["command"]["type"] == "string"


@pytest.mark.asyncio
async def test_tool_without_description() -> None:
    """describe=False registers the tool with no description."""
    async with Client(_server(describe=False)) as client:
        tools = await client.list_tools()

    assert [t.name for t in tools] == ["run_command"]
    assert not tools[0].description


def test_description_does_not_claim_safety() -> None:
    """The description states commands are unrestricted."""
    assert "not restricted" in RUN_COMMAND_DESCRIPTION
    assert "read-only" not in RUN_COMMAND_DESCRIPTION
