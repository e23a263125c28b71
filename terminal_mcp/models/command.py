"""Command execution data models."""

import json
from dataclasses import dataclass
from typing import Any

# Reported when a failed command has no usable exit status.
UNKNOWN_RETURN_CODE = -1

ERROR_PREFIX = "Error executing command: "


class ExecutionFailure(Exception):
    """A command could not be run to a successful exit.

    Attributes:
        message: Human-readable description of what went wrong.
        exit_code: Process exit status, or None when the process never
            started or was terminated by a signal.
    """

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


@dataclass(frozen=True)
class SpawnOutput:
    """Raw output of a process that exited successfully."""

    stdout: str
    stderr: str
    exit_code: int = 0


@dataclass(frozen=True)
class CommandResult:
    """Result of a local command execution."""

    stdout: str = ""
    stderr: str = ""
    return_code: int = UNKNOWN_RETURN_CODE

    @classmethod
    def from_output(cls, output: SpawnOutput) -> "CommandResult":
        return cls(
            stdout=output.stdout or "",
            stderr=output.stderr or "",
            return_code=output.exit_code,
        )

    @classmethod
    def from_failure(cls, failure: ExecutionFailure) -> "CommandResult":
        """Build the failure shape: empty stdout, prefixed stderr."""
        return_code = failure.exit_code
        if return_code is None:
            return_code = UNKNOWN_RETURN_CODE
        return cls(
            stdout="",
            stderr=f"{ERROR_PREFIX}{failure.message}",
            return_code=return_code,
        )

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0

    def to_dict(self) -> dict[str, Any]:
        """Return the payload with keys in wire order."""
        return {
            "stdout": self.stdout,
            "stderr": self.stderr,
            "return_code": self.return_code,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
