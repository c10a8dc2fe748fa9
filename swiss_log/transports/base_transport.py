"""
Base transport interface
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Optional


class BaseTransport(ABC):
    """
    Abstract base class for log transports.

    A transport delivers an already formatted string to a sink. Any object
    with a ``send(text)`` method can be used as a transport; ``send`` may
    return an awaitable, which the logger schedules without waiting on it.
    """

    @abstractmethod
    def send(self, text: str) -> Optional[Awaitable[None]]:
        """
        Deliver one formatted log line.

        Must accept any string (empty, multi-line, control characters)
        and deliver it unaltered.
        """
        pass

    def __call__(self, text: str) -> Optional[Awaitable[None]]:
        """Allow transports to be callable."""
        return self.send(text)
