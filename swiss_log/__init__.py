"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

swiss-log - Structured application logging with pluggable formatters
and transports
"""

__version__ = "1.0.0"

from swiss_log.core.logger import Logger
from swiss_log.core.logger_options import LoggerOptions
from swiss_log.core.log_entry import LogEntry, JsonMapping, JsonValue
from swiss_log.core.log_level import LogLevel
from swiss_log.core.error_serializer import serialize_error, UNDEFINED
from swiss_log.core.correlation import CorrelationIdProvider, ContextVarCorrelationIdProvider
from swiss_log.core.exceptions import SwissLogError, InvalidLevelName, InvalidFormatterInput
from swiss_log.formatters import BaseFormatter, ConsoleFormatter, JSONFormatter, CloudRunFormatter
from swiss_log.transports import BaseTransport, ConsoleTransport, InMemoryTransport, CallbackTransport

# Import submodules
from swiss_log import formatters
from swiss_log import transports

__all__ = [
    "Logger",
    "LoggerOptions",
    "LogEntry",
    "LogLevel",
    "JsonMapping",
    "JsonValue",
    "serialize_error",
    "UNDEFINED",
    "CorrelationIdProvider",
    "ContextVarCorrelationIdProvider",
    "SwissLogError",
    "InvalidLevelName",
    "InvalidFormatterInput",
    "BaseFormatter",
    "ConsoleFormatter",
    "JSONFormatter",
    "CloudRunFormatter",
    "BaseTransport",
    "ConsoleTransport",
    "InMemoryTransport",
    "CallbackTransport",
    "formatters",
    "transports",
]
