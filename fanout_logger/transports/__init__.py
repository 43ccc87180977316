"""Transports module - Log output sinks"""

from fanout_logger.transports.base_transport import (
    BaseTransport,
    Transport,
    get_hook,
    is_transport,
)
from fanout_logger.transports.console_transport import ConsoleTransport
from fanout_logger.transports.memory_transport import MemoryTransport

__all__ = [
    "BaseTransport",
    "Transport",
    "get_hook",
    "is_transport",
    "ConsoleTransport",
    "MemoryTransport",
]
