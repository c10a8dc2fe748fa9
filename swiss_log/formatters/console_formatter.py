"""
Console formatter with ANSI colors

Human-oriented output of the form::

    [2024-03-29T17:18:12.505Z] INFO  [NoContext] started server {"port":3030}
"""

import json
from typing import Callable, Dict

from swiss_log.core.log_entry import LogEntry, format_timestamp, to_json_compatible
from swiss_log.core.log_level import LogLevel
from swiss_log.formatters.base_formatter import BaseFormatter

RESET = "\033[0m"
RESET_FG = "\033[39m"


def _paint(code: str, reset: str = RESET_FG) -> Callable[[str], str]:
    return lambda text: f"{code}{text}{reset}"


bold = _paint("\033[1m", RESET)
green = _paint("\033[32m")
yellow = _paint("\033[33m")
red = _paint("\033[31m")
magenta_bright = _paint("\033[95m")
cyan_bright = _paint("\033[96m")
gray = _paint("\033[90m", RESET)

LEVEL_COLORS: Dict[LogLevel, Callable[[str], str]] = {
    LogLevel.TRACE: cyan_bright,
    LogLevel.DEBUG: magenta_bright,
    LogLevel.INFO: green,
    LogLevel.WARN: yellow,
    LogLevel.ERROR: red,
    LogLevel.FATAL: lambda text: bold(red(text)),
}


def _plain(text: str) -> str:
    return text


class ConsoleFormatter(BaseFormatter):
    """
    Format log entries as colored single lines for terminals.

    The body, when present, is appended as JSON.
    """

    def __init__(self, pretty: bool = False, colored: bool = True):
        """
        Initialize console formatter.

        Args:
            pretty: Indent the JSON body instead of printing it compactly
            colored: Use ANSI color codes

        Example:
            # Indented bodies, no colors (e.g. for log files)
            formatter = ConsoleFormatter(pretty=True, colored=False)
        """
        self.pretty = pretty
        self.colored = colored

    def _color(self, level: LogLevel) -> Callable[[str], str]:
        if not self.colored:
            return _plain
        return LEVEL_COLORS[level]

    def _render_body(self, entry: LogEntry) -> str:
        body = to_json_compatible(entry.body)
        if self.pretty:
            return json.dumps(body, indent=2, ensure_ascii=False)
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False)

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry for the console.

        Raises:
            InvalidFormatterInput: If the entry level is SILENT
        """
        self._require_severity(entry)

        color = self._color(entry.level)
        context_color = yellow if self.colored else _plain
        level_name = f"{entry.level.readable.upper():<5}"

        line = (
            f"[{format_timestamp(entry.timestamp)}] "
            f"{color(level_name)} "
            f"{context_color('[' + (entry.context or 'NoContext') + ']')} "
            f"{color(entry.message)}"
        )
        if entry.body is not None:
            body = self._render_body(entry)
            line = f"{line} {gray(body) if self.colored else body}"
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleFormatter(pretty={self.pretty}, colored={self.colored})"
