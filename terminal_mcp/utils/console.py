"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "yellow": "\033[33m",
    "green": "\033[32m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Longest matching prefix wins
COMPONENT_COLORS = {
    "terminal_mcp.server": COLORS["bright_cyan"],
    "terminal_mcp.services": COLORS["bright_blue"],
    "terminal_mcp.resources": COLORS["cyan"],
    "terminal_mcp.middleware": COLORS["yellow"],
    "terminal_mcp.config": COLORS["green"],
}

PACKAGE_PREFIX = "terminal_mcp."

_DURATION_RE = re.compile(r"(\d+\.?\d*ms)")
_RETURN_CODE_RE = re.compile(r"(return_code=)(-?\d+)")
_URI_RE = re.compile(r"(\w+://[^\s]+)")


class ConsoleFormatter(logging.Formatter):
    """Formats records as ``time | LEVEL | component | message``.

    Colors levels and components, and highlights durations, resource URIs
    and command return codes (green for 0, red otherwise).
    """

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _component_color(self, name: str) -> str:
        matches = [p for p in COMPONENT_COLORS if name.startswith(p)]
        if not matches:
            return COLORS["white"]
        return COMPONENT_COLORS[max(matches, key=len)]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d}"

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name.removeprefix(PACKAGE_PREFIX)
        return self._colorize(f"{name:<20}", self._component_color(record.name))

    def _highlight(self, message: str) -> str:
        if not self.use_colors:
            return message

        reset = COLORS["reset"]

        def color_code(match: re.Match[str]) -> str:
            code = int(match.group(2))
            color = COLORS["bright_green"] if code == 0 else COLORS["bright_red"]
            return f"{match.group(1)}{color}{match.group(2)}{reset}"

        message = _RETURN_CODE_RE.sub(color_code, message)
        message = _URI_RE.sub(f"{COLORS['bright_blue']}\\1{reset}", message)
        message = _DURATION_RE.sub(f"{COLORS['bright_yellow']}\\1{reset}", message)
        return message

    def format(self, record: logging.LogRecord) -> str:
        sep = self._colorize("|", COLORS["dim"])
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._colorize(
            f"{record.levelname:<8}",
            LEVEL_COLORS.get(record.levelname, COLORS["white"]),
        )
        component = self._format_component(record)
        message = self._highlight(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
