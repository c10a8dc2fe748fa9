"""
Log level enumeration

Levels carry an explicit numeric rank so thresholds compare correctly.
"""

from enum import IntEnum
from typing import Dict, Union

from swiss_log.core.exceptions import InvalidLevelName


class LogLevel(IntEnum):
    """
    Log level enumeration.

    SILENT is not a severity: as a logger threshold it suppresses every
    call, and calls made at SILENT are dropped before an entry is built.
    """

    SILENT = -1     # Suppress everything
    TRACE = 0       # Most verbose, detailed tracing
    DEBUG = 1       # Debug information
    INFO = 2        # Informational messages
    WARN = 3        # Warning messages
    ERROR = 4       # Error messages
    FATAL = 5       # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def readable(self) -> str:
        """Lowercase human-readable name."""
        return LEVEL_NAMES[self]

    @classmethod
    def to_readable(cls, level: "LogLevel") -> str:
        """
        Convert a level to its readable name.

        Args:
            level: Level to convert

        Returns:
            Lowercase level name, e.g. "warn"

        Raises:
            InvalidLevelName: If level is not a LogLevel member
        """
        try:
            return LEVEL_NAMES[cls(level)]
        except (ValueError, KeyError):
            raise InvalidLevelName(level) from None

    @classmethod
    def from_readable(cls, name: str) -> "LogLevel":
        """
        Convert a readable name to a level.

        Matching is exact: only the seven lowercase names are accepted.

        Raises:
            InvalidLevelName: If name is not a known level name
        """
        try:
            return LEVEL_FROM_NAME[name]
        except (KeyError, TypeError):
            raise InvalidLevelName(name) from None

    @classmethod
    def coerce(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """Accept a LogLevel, a numeric rank or a readable name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_readable(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidLevelName(value) from None

    @staticmethod
    def compare(a: "LogLevel", b: "LogLevel") -> int:
        """Three-way comparison by rank: -1, 0 or 1."""
        return (a > b) - (a < b)


# Mapping from log level to readable names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.SILENT: "silent",
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
