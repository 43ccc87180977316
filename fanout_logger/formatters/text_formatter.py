"""
Canonical text formatter

Renders "[<timestamp>] <LEVEL>: <message>" followed by the JSON context and
the error traceback when present.
"""

import json
from typing import Optional

from fanout_logger.core.log_entry import LogEntry, format_timestamp
from fanout_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries as a single line of text.

    This is the formatter a Logger uses when none is configured.
    """

    def __init__(self, include_context: bool = True, include_error: bool = True, sort_keys: bool = False):
        """
        Initialize text formatter.

        Args:
            include_context: Append the JSON-rendered context when non-empty
            include_error: Append the error traceback when an error is attached
            sort_keys: Sort context keys in the JSON rendering

        Example:
            formatter = TextFormatter()
            formatter(entry)
            # [2024-05-01T12:30:45.123Z] INFO: Application started {"version": "1.0.0"}
        """
        self.include_context = include_context
        self.include_error = include_error
        self.sort_keys = sort_keys

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as text.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        line = f"[{format_timestamp(entry.timestamp)}] {entry.level.label.upper()}: {entry.message}"

        context = self._render_context(entry)
        if context:
            line += " " + context

        if self.include_error and entry.error is not None:
            line += " " + entry.error_trace

        return line

    def _render_context(self, entry: LogEntry) -> Optional[str]:
        if not self.include_context or not entry.context:
            return None
        # default=str keeps arbitrary context values renderable
        return json.dumps(dict(entry.context), default=str, sort_keys=self.sort_keys)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(context={self.include_context}, error={self.include_error})"


default_formatter = TextFormatter()
