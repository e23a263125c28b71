"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMINAL_"


def _default_readme_path() -> Path:
    return Path.home() / "Desktop" / "mcpreadme.md"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    server_name: str = field(default="terminal-server")

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Command execution
    shell: str | None = field(default=None)
    working_dir: Path | None = field(default=None)

    # Registered capabilities
    describe_tools: bool = field(default=True)
    readme_enabled: bool = field(default=True)
    readme_path: Path = field(default_factory=_default_readme_path)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from TERMINAL_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            server_name=cls._get_str("SERVER_NAME", "terminal-server"),
            transport=cls._get_transport(),
            http_host=cls._get_str("HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("HTTP_PORT", 8000),
            shell=cls._get_str("SHELL", "") or None,
            working_dir=cls._get_path("WORKING_DIR"),
            describe_tools=cls._get_bool("DESCRIBE_TOOLS", True),
            readme_enabled=cls._get_bool("README_ENABLED", True),
            readme_path=cls._get_path("README_PATH") or _default_readme_path(),
            log_level=cls._get_str("LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("LOG_COLORS", True),
            log_payloads=cls._get_bool("LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_str(key: str, default: str) -> str:
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.strip()

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key without prefix
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Invalid int for %s%s: %s, using default %d",
                ENV_PREFIX,
                key,
                value,
                default,
            )
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_path(key: str) -> Path | None:
        value = os.getenv(ENV_PREFIX + key, "").strip()
        if not value:
            return None
        return Path(value).expanduser()

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("stdio" or "http")
        """
        transport = os.getenv(ENV_PREFIX + "TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
