"""Tests for dependency injection container."""

from pathlib import Path

from terminal_mcp.config import Settings
from terminal_mcp.dependencies import Dependencies
from terminal_mcp.services.executor import CommandExecutor, ShellSpawner


class TestDependencies:
    """Test Dependencies container."""

    def test_create_initializes_settings_and_executor(self) -> None:
        deps = Dependencies.create()

        assert isinstance(deps.settings, Settings)
        assert isinstance(deps.executor, CommandExecutor)

    def test_from_settings_configures_spawner(self, tmp_path: Path) -> None:
        settings = Settings(shell="/bin/bash", working_dir=tmp_path)

        deps = Dependencies.from_settings(settings)

        assert deps.settings is settings
        spawner = deps.executor.spawner
        assert isinstance(spawner, ShellSpawner)
        assert spawner.shell == "/bin/bash"
        assert spawner.working_dir == tmp_path

    def test_each_create_returns_fresh_instances(self) -> None:
        assert Dependencies.create().executor is not Dependencies.create().executor
