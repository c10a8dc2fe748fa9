"""
JSON formatter for structured logging

Serializes the whole entry as one JSON object
"""

import json
from typing import Optional

from swiss_log.core.log_entry import LogEntry
from swiss_log.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Output keys are message, level (numeric rank), body, context,
    correlationId, timestamp and additionalProperties; absent values are
    left out.
    """

    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        return json.dumps(
            entry.to_dict(),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            separators=None if self.indent is not None else (",", ":"),
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
