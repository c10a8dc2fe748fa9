"""
Structured formatter for cloud log collectors

Produces JSON keyed on ``severity`` as expected by Google Cloud Run and
similar collectors that parse structured stdout.
"""

import json
from typing import Any, Dict, Optional

from swiss_log.core.log_entry import LogEntry, format_timestamp, to_json_compatible
from swiss_log.formatters.base_formatter import BaseFormatter

RESERVED_KEYS = frozenset(
    ("severity", "message", "body", "context", "correlationId", "timestamp")
)


class CloudRunFormatter(BaseFormatter):
    """
    Format log entries as flat structured JSON.

    Additional properties are spread at the top level of the object. A
    property whose key collides with one of the fixed keys is dropped.
    """

    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = False):
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def to_dict(self, entry: LogEntry) -> Dict[str, Any]:
        """Build the object that format() serializes."""
        self._require_severity(entry)

        fields = {
            "severity": entry.level.readable,
            "message": entry.message,
            "body": to_json_compatible(entry.body),
            "context": entry.context,
            "correlationId": entry.correlation_id,
            "timestamp": format_timestamp(entry.timestamp),
        }
        log_dict = {k: v for k, v in fields.items() if v is not None}

        extra = to_json_compatible(entry.additional_properties) or {}
        for key, value in extra.items():
            if key not in RESERVED_KEYS:
                log_dict[key] = value
        return log_dict

    def format(self, entry: LogEntry) -> str:
        """
        Raises:
            InvalidFormatterInput: If the entry level is SILENT
        """
        return json.dumps(
            self.to_dict(entry),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            separators=None if self.indent is not None else (",", ":"),
        )

    def __repr__(self) -> str:
        return f"CloudRunFormatter(indent={self.indent})"
