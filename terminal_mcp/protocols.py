"""Protocol interfaces for dependency inversion.

The command executor depends on a process spawner, not on a concrete
subprocess implementation. Tests and alternative hosts can pass any
object with a matching ``spawn`` coroutine.

Usage Example:

    from terminal_mcp.services.executor import CommandExecutor

    class FakeSpawner:
        async def spawn(self, command: str) -> SpawnOutput:
            return SpawnOutput(stdout="hi\\n", stderr="")

    executor = CommandExecutor(spawner=FakeSpawner())
"""

from typing import Protocol, runtime_checkable

from terminal_mcp.models import SpawnOutput


@runtime_checkable
class ProcessSpawner(Protocol):
    """Protocol for running one shell command to completion."""

    async def spawn(self, command: str) -> SpawnOutput:
        """Run command and wait for it to exit.

        Args:
            command: Command string passed verbatim to the shell

        Returns:
            Captured output of a process that exited with status 0

        Raises:
            ExecutionFailure: If the process could not start, exited
                non-zero, or was killed
        """
        ...


__all__ = ["ProcessSpawner"]
