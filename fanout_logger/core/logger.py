"""
Main Logger class - asynchronous fan-out logger

Builds entries, gates them by level, formats and filters them, then hands
them to every registered transport concurrently.
"""

from __future__ import annotations
import asyncio
import dataclasses
import inspect
import sys
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from fanout_logger.core.log_level import LogLevel
from fanout_logger.core.log_entry import LogEntry, DEFAULT_SOURCE
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.formatters.text_formatter import default_formatter
from fanout_logger.transports.base_transport import get_hook, is_transport


class TransportShutdownError(Exception):
    """One or more transport shutdown hooks failed."""

    def __init__(self, failures: List[Tuple[Any, BaseException]]):
        self.failures = failures
        details = ", ".join(f"{type(t).__name__}: {e!r}" for t, e in failures)
        super().__init__(f"{len(failures)} transport(s) failed to shut down: {details}")


async def _settle(result: Any) -> None:
    """Await hook results that are awaitable; plain return values are ignored."""
    if inspect.isawaitable(result):
        await result


class Logger:
    """Main logger class with concurrent fan-out to transports."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._shutdown = False
        self._metrics = {"logged": 0, "gated": 0, "filtered": 0, "transport_errors": 0}

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def transports(self) -> Tuple[Any, ...]:
        """Snapshot of the registered transports."""
        return tuple(self._config.transports)

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def should_log(self, level: LogLevel) -> bool:
        """Check a level against the minimum level."""
        return level.priority >= self._config.min_level.priority

    def _build_entry(
        self,
        level: LogLevel,
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> LogEntry:
        """Create an entry, merging call-site context over the default context."""
        merged = {**self._config.default_context, **(context or {})}
        return LogEntry(
            level=level,
            message=message,
            context=merged,
            error=error,
            tags=(),
            source=DEFAULT_SOURCE,
        )

    def _format(self, entry: LogEntry) -> LogEntry:
        formatter = self._config.formatter or default_formatter
        return entry.with_message(formatter(entry))

    def _passes_filters(self, entry: LogEntry) -> bool:
        # Filter exceptions are configuration errors and propagate
        return all(log_filter(entry) for log_filter in self._config.filters)

    def _report(self, action: str, transport: Any, error: BaseException) -> None:
        print(
            f"[{self._config.name}] Transport error: {error} "
            f"({type(transport).__name__}.{action})",
            file=sys.stderr,
        )

    async def _write_one(self, transport: Any, entry: LogEntry) -> None:
        try:
            await _settle(transport.write(entry))
        except Exception as e:
            self._metrics["transport_errors"] += 1
            self._report("write", transport, e)

    async def _write_to_transports(self, entry: LogEntry) -> bool:
        formatted = self._format(entry)
        if not self._passes_filters(formatted):
            self._metrics["filtered"] += 1
            return False

        # Snapshot so registry changes during the await do not affect this dispatch
        transports = list(self._config.transports)
        self._metrics["logged"] += 1
        await asyncio.gather(*(self._write_one(t, formatted) for t in transports))
        return True

    async def log(
        self,
        level: Union[LogLevel, str],
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        """
        Log a message.

        Resolves once every transport write has settled. Transport failures
        are reported to stderr and never raised; filter failures are raised.

        Args:
            level: Log level (enum or name)
            message: Log message
            context: Call-site context, overriding default context keys
            error: Exception to attach to the entry
        """
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        if not self.should_log(level):
            self._metrics["gated"] += 1
            return

        entry = self._build_entry(level, message, context, error)
        await self._write_to_transports(entry)

    async def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log debug message."""
        await self.log(LogLevel.DEBUG, message, context)

    async def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log info message."""
        await self.log(LogLevel.INFO, message, context)

    async def warn(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """Log warning message."""
        await self.log(LogLevel.WARN, message, context)

    warning = warn

    async def error(
        self,
        message: str,
        error: Optional[BaseException] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Log error message."""
        await self.log(LogLevel.ERROR, message, context, error)

    async def fatal(
        self,
        message: str,
        error: Optional[BaseException] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Log fatal message."""
        await self.log(LogLevel.FATAL, message, context, error)

    critical = fatal

    def child(self, extra_context: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Logger":
        """
        Derive a logger with additional default context.

        The child gets its own copy of the transport list; formatter and
        filters are shared with the parent.

        Args:
            extra_context: Context merged over the parent's default context
            **kwargs: Additional context entries

        Returns:
            New Logger instance
        """
        merged: Dict[str, Any] = {**self._config.default_context, **(extra_context or {}), **kwargs}
        # Shallow copy: formatter and the filters list stay the same objects
        config = dataclasses.replace(
            self._config,
            default_context=merged,
            transports=list(self._config.transports),
        )
        return Logger(config)

    def add_transport(self, transport: Any) -> None:
        """Register a transport for subsequent dispatches."""
        if not is_transport(transport):
            raise TypeError(f"transport {transport!r} has no write() method")
        self._config.transports.append(transport)

    def remove_transport(self, transport: Any) -> None:
        """Unregister a transport by identity. Unknown transports are ignored."""
        self._config.transports = [t for t in self._config.transports if t is not transport]

    async def _flush_one(self, transport: Any, hook: Any) -> None:
        try:
            await _settle(hook())
        except Exception as e:
            self._metrics["transport_errors"] += 1
            self._report("flush", transport, e)

    async def flush(self) -> None:
        """Flush every transport that supports it, isolating failures."""
        pending = []
        for transport in list(self._config.transports):
            hook = get_hook(transport, "flush")
            if hook is not None:
                pending.append(self._flush_one(transport, hook))
        await asyncio.gather(*pending)

    async def shutdown(self) -> None:
        """
        Shutdown every transport that supports it.

        All hooks run concurrently and are allowed to settle. Failures are
        then raised together as TransportShutdownError, or reported to
        stderr when the config sets isolate_shutdown_errors.
        """
        if self._shutdown:
            return
        self._shutdown = True

        hooked = []
        for transport in list(self._config.transports):
            hook = get_hook(transport, "shutdown")
            if hook is not None:
                hooked.append((transport, hook))

        async def run(hook: Any) -> None:
            await _settle(hook())

        results = await asyncio.gather(
            *(run(hook) for _, hook in hooked), return_exceptions=True
        )

        failures = [
            (transport, result)
            for (transport, _), result in zip(hooked, results)
            if isinstance(result, BaseException)
        ]
        if not failures:
            return
        if self._config.isolate_shutdown_errors:
            for transport, e in failures:
                self._report("shutdown", transport, e)
            return
        raise TransportShutdownError(failures)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()
