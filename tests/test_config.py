"""Tests for Settings loaded from the environment."""

import os
from pathlib import Path

import pytest

from terminal_mcp.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TERMINAL_* variables set by the surrounding environment."""
    for key in list(os.environ):
        if key.startswith("TERMINAL_"):
            monkeypatch.delenv(key)


class TestSettingsDefaults:
    """Defaults when no variables are set."""

    def test_defaults(self) -> None:
        settings = Settings.from_env()

        assert settings.server_name == "terminal-server"
        assert settings.transport == "stdio"
        assert settings.http_host == "127.0.0.1"
        assert settings.http_port == 8000
        assert settings.shell is None
        assert settings.working_dir is None
        assert settings.describe_tools is True
        assert settings.readme_enabled is True
        assert settings.readme_path == Path.home() / "Desktop" / "mcpreadme.md"
        assert settings.log_level == "INFO"
        assert settings.slow_threshold_ms == 1000


class TestSettingsFromEnv:
    """Environment overrides."""

    def test_transport_http(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMINAL_TRANSPORT", "HTTP")
        monkeypatch.setenv("TERMINAL_HTTP_PORT", "9001")

        settings = Settings.from_env()

        assert settings.transport == "http"
        assert settings.http_port == 9001

    def test_unknown_transport_falls_back_to_stdio(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TERMINAL_TRANSPORT", "carrier-pigeon")

        assert Settings.from_env().transport == "stdio"

    def test_invalid_int_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TERMINAL_HTTP_PORT", "not-a-port")

        settings = Settings.from_env()

        assert settings.http_port == 8000
        assert "Invalid int for TERMINAL_HTTP_PORT" in caplog.text

    @pytest.mark.parametrize("value", ["0", "false", "no", "off"])
    def test_false_booleans(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("TERMINAL_DESCRIBE_TOOLS", value)
        monkeypatch.setenv("TERMINAL_README_ENABLED", value)

        settings = Settings.from_env()

        assert settings.describe_tools is False
        assert settings.readme_enabled is False

    def test_paths_and_shell(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("TERMINAL_SHELL", "/bin/bash")
        monkeypatch.setenv("TERMINAL_WORKING_DIR", str(tmp_path))
        monkeypatch.setenv("TERMINAL_README_PATH", str(tmp_path / "notes.md"))
        monkeypatch.setenv("TERMINAL_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.shell == "/bin/bash"
        assert settings.working_dir == tmp_path
        assert settings.readme_path == tmp_path / "notes.md"
        assert settings.log_level == "DEBUG"
