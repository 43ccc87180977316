"""
Compact formatter for minimal log output

Produces concise single-line log entries
"""

from fanout_logger.core.log_entry import LogEntry
from fanout_logger.formatters.base_formatter import BaseFormatter

LEVEL_ABBREVIATIONS = {
    "DEBUG": "DBG",
    "INFO": "INF",
    "WARN": "WRN",
    "ERROR": "ERR",
    "FATAL": "FTL",
}


class CompactFormatter(BaseFormatter):
    """
    Format log entries in a compact single-line format.

    Context and errors are left out; only time, level and message remain.
    """

    def __init__(self, include_timestamp: bool = True, include_source: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_source: Include the entry's source label in output

        Example:
            # Minimal format: "INF: message"
            formatter = CompactFormatter(include_timestamp=False)

            # With timestamp: "12:34:56 INF: message"
            formatter = CompactFormatter()

            # With source: "12:34:56 [application] INF: message"
            formatter = CompactFormatter(include_source=True)
        """
        self.include_timestamp = include_timestamp
        self.include_source = include_source

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry in compact format.

        Args:
            entry: Log entry to format

        Returns:
            Compact formatted string
        """
        parts = []

        if self.include_timestamp:
            parts.append(entry.timestamp.strftime("%H:%M:%S"))

        if self.include_source and entry.source:
            parts.append(f"[{entry.source}]")

        level_abbrev = LEVEL_ABBREVIATIONS.get(entry.level.name, entry.level.name[:3])
        parts.append(f"{level_abbrev}:")

        parts.append(entry.message)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, source={self.include_source})"
