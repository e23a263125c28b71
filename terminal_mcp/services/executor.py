"""Local shell command execution."""

import asyncio
import logging
from pathlib import Path

from terminal_mcp.models import CommandResult, ExecutionFailure, SpawnOutput
from terminal_mcp.protocols import ProcessSpawner

logger = logging.getLogger(__name__)


def _decode(stream: bytes | None) -> str:
    if not stream:
        return ""
    return stream.decode("utf-8", errors="replace")


def _failure_message(command: str, stderr: str, returncode: int) -> str:
    message = f"Command failed: {command}\n{stderr}"
    if returncode < 0:
        message += f"(terminated by signal {-returncode})"
    return message


class ShellSpawner:
    """Runs commands through the host shell with asyncio subprocesses."""

    def __init__(
        self,
        shell: str | None = None,
        working_dir: Path | None = None,
    ) -> None:
        """Initialize spawner.

        Args:
            shell: Shell executable to use instead of the platform default
            working_dir: Directory commands run in (default: current)
        """
        self.shell = shell
        self.working_dir = working_dir

    async def spawn(self, command: str) -> SpawnOutput:
        """Run command to completion and capture both streams.

        Raises:
            ExecutionFailure: If the process cannot start, exits non-zero,
                or is terminated by a signal.
        """
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                executable=self.shell,
                cwd=self.working_dir,
            )
            stdout, stderr = await process.communicate()
        except (OSError, ValueError) as e:
            raise ExecutionFailure(str(e)) from e

        returncode = process.returncode
        output = _decode(stdout)
        error = _decode(stderr)

        if returncode is None or returncode < 0:
            raise ExecutionFailure(
                _failure_message(command, error, returncode or 0),
            )
        if returncode != 0:
            raise ExecutionFailure(
                _failure_message(command, error, returncode),
                exit_code=returncode,
            )

        return SpawnOutput(stdout=output, stderr=error, exit_code=0)


class CommandExecutor:
    """Executes commands and normalizes every outcome to a CommandResult.

    ``execute`` never raises for a command that fails: spawn errors,
    missing binaries and non-zero exits all come back as a result whose
    stderr carries the error description.

    Example:
        >>> executor = CommandExecutor()
        >>> result = await executor.execute("echo hello")
        >>> result.stdout
        'hello\\n'
    """

    def __init__(self, spawner: ProcessSpawner | None = None) -> None:
        self.spawner: ProcessSpawner = spawner or ShellSpawner()

    async def execute(self, command: str) -> CommandResult:
        """Run command once and wait for it to finish.

        Args:
            command: Command string passed verbatim to the shell

        Returns:
            CommandResult with stdout, stderr, and return code
        """
        logger.debug("Running command: %r", command)

        try:
            output = await self.spawner.spawn(command)
        except ExecutionFailure as e:
            result = CommandResult.from_failure(e)
            logger.warning(
                "Command failed: %r (return_code=%d)",
                command,
                result.return_code,
            )
            return result

        result = CommandResult.from_output(output)
        logger.info(
            "Command completed: %r (return_code=%d, stdout=%d chars)",
            command,
            result.return_code,
            len(result.stdout),
        )
        return result
