"""Exceptions raised by the logger system"""


class SwissLogError(Exception):
    """Base class for errors raised by swiss_log itself."""


class InvalidLevelName(SwissLogError, ValueError):
    """Raised when a level name or value is not one of the known levels."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"invalid log level {name!r}")


class InvalidFormatterInput(SwissLogError, ValueError):
    """Raised when a formatter receives an entry it cannot render."""
