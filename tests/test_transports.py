"""Tests for transports and the transport contract"""

import io
from unittest.mock import Mock

import pytest

from fanout_logger import Logger, LoggerConfig, LogLevel
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.transports import (
    BaseTransport,
    ConsoleTransport,
    MemoryTransport,
    Transport,
    get_hook,
    is_transport,
)


def entry(level=LogLevel.INFO, message="hello", context=None, error=None):
    return LogEntry(level=level, message=message, context=context or {}, error=error)


class TestTransportContract:
    """Test hook discovery."""

    def test_is_transport(self):
        assert is_transport(MemoryTransport())
        assert not is_transport(object())
        assert isinstance(MemoryTransport(), Transport)

    def test_get_hook(self):
        class WriteOnly:
            def write(self, entry):
                pass

        class NotCallable:
            shutdown = "yes"

            def write(self, entry):
                pass

        memory = MemoryTransport()
        assert get_hook(memory, "shutdown") == memory.shutdown
        assert get_hook(WriteOnly(), "flush") is None
        assert get_hook(NotCallable(), "shutdown") is None

    def test_get_hook_rejects_unknown_name(self):
        with pytest.raises(ValueError):
            get_hook(MemoryTransport(), "close")

    def test_base_transport_defaults(self):
        class Minimal(BaseTransport):
            def write(self, entry):
                pass

        transport = Minimal()
        assert transport.flush() is None
        assert transport.shutdown() is None

        with pytest.raises(TypeError):
            BaseTransport()


class TestConsoleTransport:
    """Test per-level stream routing."""

    def make(self, **kwargs):
        streams = {level: io.StringIO() for level in LogLevel}
        return ConsoleTransport(streams=streams, **kwargs), streams

    def test_routes_by_level(self):
        transport, streams = self.make()

        for level in LogLevel:
            transport.write(entry(level=level, message=level.label))

        for level in LogLevel:
            output = streams[level].getvalue()
            assert output.count("\n") == 1
            assert f"{level.name}: {level.label}" in output

    def test_context_and_error(self):
        transport, streams = self.make()
        error = RuntimeError("Database error")

        transport.write(entry(level=LogLevel.ERROR, message="Failed", context={"userId": "123"}, error=error))
        transport.write(entry(level=LogLevel.INFO, message="ok", error=error))

        error_line = streams[LogLevel.ERROR].getvalue()
        assert '{"userId": "123"}' in error_line
        assert "RuntimeError('Database error')" in error_line
        assert "RuntimeError" not in streams[LogLevel.INFO].getvalue()

    def test_colored(self):
        transport, streams = self.make(colored=True)
        transport.write(entry(level=LogLevel.WARN))
        output = streams[LogLevel.WARN].getvalue()
        assert output.startswith(LogLevel.WARN.color_code)
        assert LogLevel.WARN.reset_code in output

    def test_default_streams(self, capsys):
        transport = ConsoleTransport()
        transport.write(entry(level=LogLevel.INFO, message="to stdout"))
        transport.write(entry(level=LogLevel.ERROR, message="to stderr"))

        captured = capsys.readouterr()
        assert "to stdout" in captured.out
        assert "to stderr" in captured.err

    def test_each_level_can_have_its_own_channel(self):
        transport, streams = self.make()
        transport.write(entry(level=LogLevel.WARN, message="warned"))
        transport.write(entry(level=LogLevel.FATAL, message="fatal"))

        assert len({id(transport.stream_for(level)) for level in LogLevel}) == 5
        assert "warned" in streams[LogLevel.WARN].getvalue()
        assert "warned" not in streams[LogLevel.ERROR].getvalue()
        assert "fatal" in streams[LogLevel.FATAL].getvalue()

    def test_unset_levels_collapse_to_standard_streams(self):
        import sys

        transport = ConsoleTransport(streams={LogLevel.DEBUG: io.StringIO()})
        assert transport.stream_for(LogLevel.INFO) is sys.stdout
        assert transport.stream_for(LogLevel.WARN) is sys.stderr
        assert transport.stream_for(LogLevel.FATAL) is sys.stderr

    def test_flush_each_stream_once(self):
        shared = Mock()
        transport = ConsoleTransport(streams={level: shared for level in LogLevel})
        transport.flush()
        shared.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_with_logger(self):
        transport, streams = self.make()
        logger = Logger(LoggerConfig(transports=[transport], default_context={"app": "MyApp"}))

        await logger.warn("disk low")

        output = streams[LogLevel.WARN].getvalue()
        assert "WARN: disk low" in output
        assert '"app": "MyApp"' in output


class TestMemoryTransport:
    """Test in-memory collection."""

    @pytest.mark.asyncio
    async def test_collects_in_order(self):
        transport = MemoryTransport()
        await transport.write(entry(message="a"))
        await transport.write(entry(message="b"))
        assert transport.messages == ["a", "b"]

        transport.clear()
        assert len(transport) == 0

    @pytest.mark.asyncio
    async def test_max_entries(self):
        transport = MemoryTransport(max_entries=2)
        for message in ("a", "b", "c"):
            await transport.write(entry(message=message))
        assert transport.messages == ["b", "c"]

    def test_invalid_max_entries(self):
        with pytest.raises(ValueError):
            MemoryTransport(max_entries=0)

    @pytest.mark.asyncio
    async def test_hooks(self):
        transport = MemoryTransport()
        await transport.flush()
        await transport.shutdown()
        assert transport.flush_count == 1
        assert transport.closed
