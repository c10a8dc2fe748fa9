"""
Correlation id providers

A provider is asked for the current correlation id once per accepted log
call.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional, Protocol, runtime_checkable
from uuid import uuid4


@runtime_checkable
class CorrelationIdProvider(Protocol):
    """Anything with a ``get()`` returning the current id or None."""

    def get(self) -> Optional[str]: ...


class ContextVarCorrelationIdProvider:
    """
    Correlation ids scoped to the current thread or asyncio task.

    Example:
        provider = ContextVarCorrelationIdProvider()
        logger = Logger(LoggerOptions(correlation_id_provider=provider))

        async def handle(request):
            with provider.scope(request.headers.get("x-request-id")):
                logger.info("handling request")
    """

    def __init__(self, name: str = "swiss_log_correlation_id"):
        self._var: ContextVar[Optional[str]] = ContextVar(name, default=None)

    def get(self) -> Optional[str]:
        return self._var.get()

    def set(self, correlation_id: Optional[str]) -> Token:
        return self._var.set(correlation_id)

    def reset(self, token: Token) -> None:
        self._var.reset(token)

    @contextmanager
    def scope(self, correlation_id: Optional[str] = None) -> Iterator[str]:
        """Bind an id (a fresh uuid4 when none is given) for the block."""
        if correlation_id is None:
            correlation_id = str(uuid4())
        token = self._var.set(correlation_id)
        try:
            yield correlation_id
        finally:
            self._var.reset(token)

    def __repr__(self) -> str:
        return f"ContextVarCorrelationIdProvider(name={self._var.name!r})"
