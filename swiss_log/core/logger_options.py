"""
Logger configuration management
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from swiss_log.core.correlation import CorrelationIdProvider
from swiss_log.core.log_level import LogLevel
from swiss_log.formatters.base_formatter import BaseFormatter
from swiss_log.formatters.cloud_run_formatter import CloudRunFormatter
from swiss_log.formatters.console_formatter import ConsoleFormatter
from swiss_log.formatters.json_formatter import JSONFormatter
from swiss_log.transports.base_transport import BaseTransport
from swiss_log.transports.console_transport import ConsoleTransport

FORMATTERS = {
    "console": ConsoleFormatter,
    "json": JSONFormatter,
    "cloud": CloudRunFormatter,
}


@dataclass
class LoggerOptions:
    """
    Logger configuration.

    Every option may be omitted; omitted options fall back to an INFO
    threshold, the console formatter and a single console transport.
    """

    log_level: Union[LogLevel, str] = LogLevel.INFO
    formatter: BaseFormatter = field(default_factory=ConsoleFormatter)
    transports: List[BaseTransport] = field(
        default_factory=lambda: [ConsoleTransport()]
    )
    context: Optional[str] = None
    correlation_id_provider: Optional[CorrelationIdProvider] = None
    attributes: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_level = LogLevel.coerce(self.log_level)

        if self.formatter is None:
            self.formatter = ConsoleFormatter()
        if self.transports is None:
            self.transports = [ConsoleTransport()]
        else:
            self.transports = list(self.transports)

        if self.attributes is not None:
            if not isinstance(self.attributes, Mapping):
                raise TypeError("attributes must be a mapping")
            self.attributes = dict(self.attributes)

    @classmethod
    def default(cls) -> "LoggerOptions":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerOptions":
        """Create configuration for local debugging."""
        return cls(
            log_level=LogLevel.DEBUG,
            formatter=ConsoleFormatter(pretty=True),
        )

    @classmethod
    def production_config(cls) -> "LoggerOptions":
        """Create configuration for structured logs collected from stdout."""
        return cls(
            log_level=LogLevel.INFO,
            formatter=CloudRunFormatter(),
        )

    @classmethod
    def from_dict(cls, data: Mapping) -> "LoggerOptions":
        """
        Create configuration from a plain mapping, e.g. a parsed settings file.

        Recognized keys: log_level, context, attributes, formatter
        ("console", "json" or "cloud") and pretty (console formatter only).
        Transports are not configurable this way; the console transport
        is used.

        Raises:
            InvalidLevelName: If log_level is not a known level name
            ValueError: If formatter is not a known formatter name
        """
        formatter_name = data.get("formatter", "console")
        try:
            formatter_cls = FORMATTERS[formatter_name]
        except KeyError:
            raise ValueError(f"Unknown formatter: {formatter_name!r}") from None

        if formatter_cls is ConsoleFormatter:
            formatter = ConsoleFormatter(pretty=bool(data.get("pretty", False)))
        else:
            formatter = formatter_cls()

        return cls(
            log_level=data.get("log_level", LogLevel.INFO),
            formatter=formatter,
            context=data.get("context"),
            attributes=data.get("attributes"),
        )
