"""
Transport interface

A transport receives formatted log entries and performs the actual output.
Only write() is required; flush() and shutdown() are optional hooks.
Any of them may return an awaitable, which the logger awaits.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

from fanout_logger.core.log_entry import LogEntry

HookResult = Union[None, Awaitable[None]]

OPTIONAL_HOOKS = ("flush", "shutdown")


@runtime_checkable
class Transport(Protocol):
    """Structural type of a transport: anything with write(entry)."""

    def write(self, entry: LogEntry) -> HookResult:
        ...


class BaseTransport(ABC):
    """
    Convenience base class for transports.

    Subclasses implement write(); flush() and shutdown() default to no-ops.
    """

    @abstractmethod
    def write(self, entry: LogEntry) -> HookResult:
        """
        Deliver a log entry.

        Args:
            entry: The formatted log entry
        """
        pass

    def flush(self) -> HookResult:
        """Flush buffered output."""
        return None

    def shutdown(self) -> HookResult:
        """Release resources held by the transport."""
        return None


def is_transport(obj: Any) -> bool:
    """Check whether obj exposes a callable write()."""
    return callable(getattr(obj, "write", None))


def get_hook(transport: Any, name: str) -> Optional[Callable[[], HookResult]]:
    """
    Look up an optional transport hook.

    Args:
        transport: Transport instance
        name: Hook name ("flush" or "shutdown")

    Returns:
        The bound hook, or None if the transport does not provide one
    """
    if name not in OPTIONAL_HOOKS:
        raise ValueError(f"Unknown transport hook: {name}")
    hook = getattr(transport, name, None)
    return hook if callable(hook) else None
