"""In-memory transport for tests"""

from typing import List

from swiss_log.transports.base_transport import BaseTransport


class InMemoryTransport(BaseTransport):
    """
    Keep every formatted log line in a list.

    Lines are stored in send order and never truncated or dropped.
    """

    def __init__(self):
        self.logs: List[str] = []

    def send(self, text: str) -> None:
        self.logs.append(text)

    def clear(self) -> None:
        """Forget all recorded lines."""
        self.logs.clear()

    def __repr__(self) -> str:
        return f"InMemoryTransport(logs={len(self.logs)})"
