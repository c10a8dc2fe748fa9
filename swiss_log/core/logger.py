"""
Main Logger class

Filters by level, builds the entry, formats it once and fans the result
out to every transport.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, Tuple, TypeVar, Union

from swiss_log.core.correlation import CorrelationIdProvider
from swiss_log.core.error_serializer import serialize_error
from swiss_log.core.log_entry import JsonMapping, JsonValue, LogEntry
from swiss_log.core.log_level import LogLevel
from swiss_log.core.logger_options import LoggerOptions
from swiss_log.formatters.base_formatter import BaseFormatter
from swiss_log.formatters.console_formatter import ConsoleFormatter
from swiss_log.transports.base_transport import BaseTransport

T = TypeVar("T")

DEFAULT_CAPTURE_MESSAGE = "unhandled error"


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


class Logger:
    """
    Structured logger with pluggable formatter and transports.

    Setters return the logger so configuration can be chained. A configured
    logger may be shared across threads for logging; use clone() instead
    of mutating a shared instance.

    Example:
        logger = (Logger()
            .set_context("http")
            .add_property("service", "api"))

        logger.info("started server", {"port": 3030})
    """

    def __init__(self, options: Optional[LoggerOptions] = None):
        options = options or LoggerOptions.default()
        self._log_level: LogLevel = options.log_level
        self._formatter: BaseFormatter = options.formatter
        self._transports: List[BaseTransport] = list(options.transports)
        self._context: Optional[str] = options.context
        self._correlation_id_provider: Optional[CorrelationIdProvider] = (
            options.correlation_id_provider
        )
        self._attributes: Optional[Dict[str, JsonValue]] = (
            dict(options.attributes) if options.attributes is not None else None
        )
        self._pending: Set[asyncio.Future] = set()

    @classmethod
    def with_defaults(cls) -> "Logger":
        """Create a logger using the console formatter and console transport."""
        return cls(LoggerOptions(formatter=ConsoleFormatter()))

    # Configuration

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @property
    def context(self) -> Optional[str]:
        return self._context

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    @property
    def transports(self) -> Tuple[BaseTransport, ...]:
        return tuple(self._transports)

    @property
    def correlation_id_provider(self) -> Optional[CorrelationIdProvider]:
        return self._correlation_id_provider

    @property
    def additional_properties(self) -> Optional[Dict[str, JsonValue]]:
        """Copy of the logger-wide properties, or None if none were set."""
        return dict(self._attributes) if self._attributes is not None else None

    def set_context(self, context: Optional[str]) -> "Logger":
        self._context = context
        return self

    def set_log_level(self, level: Union[LogLevel, str]) -> "Logger":
        """Set the threshold; readable names such as "debug" are accepted."""
        self._log_level = LogLevel.coerce(level)
        return self

    def set_formatter(self, formatter: BaseFormatter) -> "Logger":
        self._formatter = formatter
        return self

    def set_transports(self, transports: List[BaseTransport]) -> "Logger":
        self._transports = list(transports)
        return self

    def set_transport(self, transport: BaseTransport) -> "Logger":
        self._transports = [transport]
        return self

    def add_transport(self, transport: BaseTransport) -> "Logger":
        self._transports.append(transport)
        return self

    def add_property(self, key: str, value: JsonValue) -> "Logger":
        """Add one logger-wide property; a repeated key replaces the old value."""
        if self._attributes is None:
            self._attributes = {}
        self._attributes[key] = value
        return self

    def add_properties(self, properties: JsonMapping) -> "Logger":
        """Merge several logger-wide properties, last write wins per key."""
        if self._attributes is None:
            self._attributes = {}
        self._attributes.update(properties)
        return self

    def clone(self) -> "Logger":
        """
        Create an independent copy of this logger.

        The copy shares the formatter, the transport objects and the
        correlation id provider. Its context, transport list and properties
        can be changed without affecting this logger.
        """
        other = Logger(
            LoggerOptions(
                log_level=self._log_level,
                formatter=self._formatter,
                transports=self._transports,
                context=self._context,
                correlation_id_provider=self._correlation_id_provider,
                attributes=self._attributes,
            )
        )
        return other

    def clone_with_context(self, context: Optional[str]) -> "Logger":
        return self.clone().set_context(context)

    # Logging

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Whether a call at this level would reach the transports."""
        if level == LogLevel.SILENT or self._log_level == LogLevel.SILENT:
            return False
        return self._log_level <= level

    def log(self, level: LogLevel, message: str, body: Optional[JsonMapping] = None) -> None:
        """
        Log a message at the given level.

        Exceptions raised by the formatter or by a transport propagate to
        the caller; transports after a failing one are not called.
        """
        if not self.is_enabled_for(level):
            return

        provider = self._correlation_id_provider
        entry = LogEntry(
            message=message,
            level=level,
            body=body,
            context=self._context,
            correlation_id=provider.get() if provider is not None else None,
            additional_properties=(
                dict(self._attributes) if self._attributes is not None else None
            ),
        )

        text = self._formatter.format(entry)
        for transport in list(self._transports):
            result = transport.send(text)
            if inspect.isawaitable(result):
                self._dispatch(result)

    def _dispatch(self, awaitable: Awaitable[Any]) -> None:
        """Run an asynchronous send without waiting for it."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_await(awaitable))
            return

        future = asyncio.ensure_future(awaitable)
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)

    def trace(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, body)

    def debug(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, body)

    def info(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, body)

    def warn(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, body)

    def error(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, body)

    def fatal(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, body)

    def silent(self, message: str, body: Optional[JsonMapping] = None) -> None:
        """Accepted for symmetry; never emits anything."""
        self.log(LogLevel.SILENT, message, body)

    # Error capture

    def _log_failure(self, error: BaseException, message: Optional[str]) -> None:
        self.error(
            message if message is not None else DEFAULT_CAPTURE_MESSAGE,
            {"error": serialize_error(error)},
        )

    def capture_error(self, operation: Callable[[], T], message: Optional[str] = None) -> T:
        """
        Run ``operation`` and log it at ERROR if it raises.

        The exception is re-raised as is, so this only adds a log line to
        normal error propagation.

        Example:
            config = logger.capture_error(lambda: load_config(path))
        """
        try:
            return operation()
        except Exception as error:
            self._log_failure(error, message)
            raise

    async def capture_async_error(
        self, awaitable: Awaitable[T], message: Optional[str] = None
    ) -> T:
        """
        Await ``awaitable`` and log it at ERROR if it raises.

        Cancellation is propagated without logging.

        Example:
            response = await logger.capture_async_error(client.get("/api/data"))
        """
        try:
            return await awaitable
        except Exception as error:
            self._log_failure(error, message)
            raise

    def __repr__(self) -> str:
        return (
            f"Logger(level={self._log_level.readable}, context={self._context!r}, "
            f"formatter={self._formatter!r}, transports={len(self._transports)})"
        )
