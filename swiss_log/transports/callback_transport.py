"""
Callback-based transport

Delivers formatted logs through a user-supplied function
"""

from typing import Awaitable, Callable, Optional, Union

from swiss_log.transports.base_transport import BaseTransport

SendCallback = Callable[[str], Union[None, Awaitable[None]]]


class CallbackTransport(BaseTransport):
    """
    Deliver log lines by calling a function.

    Lets any existing sink be plugged in without writing a class.
    """

    def __init__(self, callback: SendCallback):
        """
        Initialize callback transport.

        Args:
            callback: Function taking the formatted string. It may be a
                     coroutine function; the logger then schedules the
                     returned coroutine without awaiting it.

        Example:
            # Forward to an existing stdlib logger
            std_logger = logging.getLogger("app")
            transport = CallbackTransport(std_logger.info)

            # Post to a collector
            async def post(text):
                await client.post("/api/logs", content=text)

            transport = CallbackTransport(post)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def send(self, text: str) -> Optional[Awaitable[None]]:
        """Invoke the callback; exceptions propagate to the caller."""
        return self.callback(text)

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, "__name__", repr(self.callback))
        return f"CallbackTransport(callback={callback_name})"
