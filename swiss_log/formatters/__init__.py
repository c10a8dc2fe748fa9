"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from swiss_log.formatters.base_formatter import BaseFormatter
from swiss_log.formatters.console_formatter import ConsoleFormatter
from swiss_log.formatters.json_formatter import JSONFormatter
from swiss_log.formatters.cloud_run_formatter import CloudRunFormatter

__all__ = [
    "BaseFormatter",
    "ConsoleFormatter",
    "JSONFormatter",
    "CloudRunFormatter",
]
