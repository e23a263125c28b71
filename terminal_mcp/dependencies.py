"""Dependency container for Terminal MCP.

Built once by the entry point and passed to ``create_server``; nothing in
the package keeps a process-wide server or executor.
"""

from dataclasses import dataclass

from terminal_mcp.config import Settings
from terminal_mcp.services.executor import CommandExecutor, ShellSpawner


@dataclass
class Dependencies:
    """Container for Terminal MCP dependencies.

    Example:
        deps = Dependencies.create()
        server = create_server(deps)
    """

    settings: Settings
    executor: CommandExecutor

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies with settings read from the environment."""
        return cls.from_settings(Settings.from_env())

    @classmethod
    def from_settings(cls, settings: Settings) -> "Dependencies":
        """Create dependencies with custom settings.

        Args:
            settings: Custom Settings instance

        Returns:
            Dependencies with executor configured from settings
        """
        spawner = ShellSpawner(
            shell=settings.shell,
            working_dir=settings.working_dir,
        )
        return cls(settings=settings, executor=CommandExecutor(spawner=spawner))
