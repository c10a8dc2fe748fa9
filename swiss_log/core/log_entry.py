"""
Log entry data structure

One immutable record is built per accepted log call.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Union

from swiss_log.core.log_level import LogLevel

JsonScalar = Union[str, int, float, bool, datetime, None]
JsonValue = Union[JsonScalar, "JsonMapping", Sequence["JsonValue"]]
JsonMapping = Mapping[str, JsonValue]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC.

    Example:
        2024-03-29T17:18:12.505Z
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_json_compatible(value: Any) -> Any:
    """
    Convert a structured value into plain JSON types.

    Walks mappings and sequences recursively; datetimes become
    timestamp strings, tuples become lists and mapping keys become str.
    Anything else is returned unchanged for json.dumps to handle.
    """
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Mapping):
        return {str(k): to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(v) for v in value]
    return value


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    ``body`` belongs to the single call; ``additional_properties`` are the
    logger-wide attributes at the time of the call. Formatters decide how
    the two are combined.
    """

    message: str
    level: LogLevel
    timestamp: datetime = field(default_factory=utc_now)
    body: Optional[JsonMapping] = None
    context: Optional[str] = None
    correlation_id: Optional[str] = None
    additional_properties: Optional[JsonMapping] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to its wire-shape dictionary.

        Keys whose value is absent are left out.

        Returns:
            Dictionary with keys message, level, body, context,
            correlationId, timestamp and additionalProperties
        """
        data = {
            "message": self.message,
            "level": int(self.level),
            "body": to_json_compatible(self.body),
            "context": self.context,
            "correlationId": self.correlation_id,
            "timestamp": format_timestamp(self.timestamp),
            "additionalProperties": to_json_compatible(self.additional_properties),
        }
        return {k: v for k, v in data.items() if v is not None}
