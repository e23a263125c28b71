"""run_command tool: execute a shell command on the host."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from terminal_mcp.services.executor import CommandExecutor

RUN_COMMAND_DESCRIPTION = (
    "Run a terminal command and return the output.\n\n"
    "The command is passed verbatim to the host shell and is not "
    "restricted or sandboxed in any way. Only run commands you would "
    "run yourself.\n\n"
    "Returns:\n"
    "  A JSON object containing stdout, stderr, and return_code."
)

RunCommandTool = Callable[[str], Awaitable[str]]


def make_run_command(executor: CommandExecutor) -> RunCommandTool:
    """Bind the tool handler to an executor."""

    async def run_command(
        command: Annotated[
            str,
            Field(description="The command to execute in the terminal."),
        ],
    ) -> str:
        result = await executor.execute(command)
        return result.to_json()

    return run_command


def register_run_command(
    server: FastMCP,
    executor: CommandExecutor,
    describe: bool = True,
) -> None:
    """Register the run_command tool on server.

    Args:
        server: Server to register on
        executor: Executor the tool delegates to
        describe: Attach the tool description (otherwise none is sent)
    """
    server.tool(
        name="run_command",
        description=RUN_COMMAND_DESCRIPTION if describe else None,
        output_schema=None,
    )(make_run_command(executor))
