"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerOptions: Configuration management
- serialize_error: Error to JSON-safe structure conversion
"""

from swiss_log.core.exceptions import InvalidFormatterInput, InvalidLevelName, SwissLogError
from swiss_log.core.log_level import LogLevel
from swiss_log.core.log_entry import JsonMapping, JsonValue, LogEntry
from swiss_log.core.error_serializer import UNDEFINED, serialize_error
from swiss_log.core.correlation import ContextVarCorrelationIdProvider, CorrelationIdProvider
from swiss_log.core.logger_options import LoggerOptions
from swiss_log.core.logger import Logger

__all__ = [
    "Logger",
    "LogEntry",
    "LogLevel",
    "LoggerOptions",
    "JsonMapping",
    "JsonValue",
    "serialize_error",
    "UNDEFINED",
    "CorrelationIdProvider",
    "ContextVarCorrelationIdProvider",
    "SwissLogError",
    "InvalidLevelName",
    "InvalidFormatterInput",
]
