"""In-memory transport that keeps delivered entries"""

from collections import deque
from typing import Deque, List, Optional

from fanout_logger.core.log_entry import LogEntry
from fanout_logger.transports.base_transport import BaseTransport


class MemoryTransport(BaseTransport):
    """
    Collect delivered entries in memory.

    Useful for tests and for inspecting what a logger emitted.
    """

    def __init__(self, max_entries: Optional[int] = None):
        """
        Initialize memory transport.

        Args:
            max_entries: Keep at most this many entries, dropping the oldest.
                None keeps everything.
        """
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self.flush_count = 0
        self.closed = False

    async def write(self, entry: LogEntry) -> None:
        """Store the entry."""
        self._entries.append(entry)

    async def flush(self) -> None:
        """Count flush requests."""
        self.flush_count += 1

    async def shutdown(self) -> None:
        """Mark the transport closed."""
        self.closed = True

    @property
    def entries(self) -> List[LogEntry]:
        """Entries in delivery order."""
        return list(self._entries)

    @property
    def messages(self) -> List[str]:
        """Messages of the stored entries."""
        return [entry.message for entry in self._entries]

    def clear(self) -> None:
        """Drop all stored entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
