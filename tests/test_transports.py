"""Tests for log transports"""

import asyncio
import io
from unittest.mock import Mock

import pytest

from swiss_log import (
    Logger,
    LoggerOptions,
    JSONFormatter,
    BaseTransport,
    CallbackTransport,
    ConsoleTransport,
    InMemoryTransport,
)

AWKWARD_STRINGS = ["", "line one\nline two", "tab\tbell\x07escape\x1b[0m", "ünïcødé"]


class TestBaseTransport:
    """Test transport interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseTransport()

    def test_callable(self):
        transport = InMemoryTransport()
        transport("hello")
        assert transport.logs == ["hello"]


class TestConsoleTransport:
    """Test console transport."""

    def test_writes_line_to_stream(self):
        stream = io.StringIO()
        transport = ConsoleTransport(stream=stream)
        transport.send("first")
        transport.send("second")
        assert stream.getvalue() == "first\nsecond\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleTransport().send("to stdout")
        captured = capsys.readouterr()
        assert captured.out == "to stdout\n"
        assert captured.err == ""

    @pytest.mark.parametrize("text", AWKWARD_STRINGS)
    def test_text_unaltered(self, text):
        stream = io.StringIO()
        ConsoleTransport(stream=stream).send(text)
        assert stream.getvalue() == text + "\n"


class TestInMemoryTransport:
    """Test in-memory transport."""

    def test_records_in_order(self):
        transport = InMemoryTransport()
        for i in range(100):
            transport.send(str(i))
        assert transport.logs == [str(i) for i in range(100)]

    @pytest.mark.parametrize("text", AWKWARD_STRINGS)
    def test_text_unaltered(self, text):
        transport = InMemoryTransport()
        transport.send(text)
        assert transport.logs == [text]

    def test_clear(self):
        transport = InMemoryTransport()
        transport.send("a")
        transport.clear()
        assert transport.logs == []


class TestCallbackTransport:
    """Test callback transport."""

    def test_forwards_text(self):
        callback = Mock(return_value=None)
        CallbackTransport(callback).send("hello")
        callback.assert_called_once_with("hello")

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            CallbackTransport("not callable")

    def test_repr(self):
        def deliver(text):
            pass

        assert "deliver" in repr(CallbackTransport(deliver))

    def test_error_propagates(self):
        transport = CallbackTransport(Mock(side_effect=OSError("pipe closed")))
        with pytest.raises(OSError):
            transport.send("hello")


class TestAsyncTransports:
    """Test fire-and-forget delivery of asynchronous transports."""

    def test_async_send_outside_event_loop(self):
        received = []

        async def deliver(text):
            received.append(text)

        logger = Logger(LoggerOptions(formatter=JSONFormatter(), transports=[CallbackTransport(deliver)]))
        logger.info("hello")

        assert len(received) == 1

    def test_async_send_inside_event_loop_is_not_awaited(self):
        received = []
        release = None

        async def deliver(text):
            await release.wait()
            received.append(text)

        logger = Logger(LoggerOptions(formatter=JSONFormatter(), transports=[CallbackTransport(deliver)]))

        async def main():
            nonlocal release
            release = asyncio.Event()
            logger.info("hello")
            assert received == []
            release.set()
            for _ in range(5):
                await asyncio.sleep(0)
            return list(received)

        assert len(asyncio.run(main())) == 1

    def test_sync_and_async_transports_mixed(self):
        memory = InMemoryTransport()
        received = []

        async def deliver(text):
            received.append(text)

        logger = Logger(
            LoggerOptions(
                formatter=JSONFormatter(),
                transports=[memory, CallbackTransport(deliver)],
            )
        )

        async def main():
            logger.info("hello")
            await asyncio.sleep(0)

        asyncio.run(main())
        assert memory.logs == received
