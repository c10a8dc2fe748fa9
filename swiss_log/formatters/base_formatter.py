"""
Base formatter interface
"""

from abc import ABC, abstractmethod

from swiss_log.core.exceptions import InvalidFormatterInput
from swiss_log.core.log_entry import LogEntry
from swiss_log.core.log_level import LogLevel


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into strings ready for transports.
    Any object with a ``format(entry) -> str`` method can be used as a
    formatter; subclassing is optional.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Must not mutate the entry.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)

    @staticmethod
    def _require_severity(entry: LogEntry) -> None:
        if entry.level == LogLevel.SILENT:
            raise InvalidFormatterInput("silent log level should not be passed")
