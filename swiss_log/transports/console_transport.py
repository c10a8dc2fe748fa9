"""Console transport"""

import sys
from typing import Optional, TextIO

from swiss_log.transports.base_transport import BaseTransport


class ConsoleTransport(BaseTransport):
    """Write formatted logs to standard output, one line per call."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console transport.

        Args:
            stream: Output stream (default: sys.stdout at the time of each send)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def send(self, text: str) -> None:
        """Write one log line to the stream."""
        stream = self.stream
        stream.write(text + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleTransport(stream={self._stream!r})"
