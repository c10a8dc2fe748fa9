"""
Log transports module

Transports deliver formatted log strings to their destination.
"""

from swiss_log.transports.base_transport import BaseTransport
from swiss_log.transports.console_transport import ConsoleTransport
from swiss_log.transports.memory_transport import InMemoryTransport
from swiss_log.transports.callback_transport import CallbackTransport

__all__ = [
    "BaseTransport",
    "ConsoleTransport",
    "InMemoryTransport",
    "CallbackTransport",
]
