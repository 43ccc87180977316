"""
JSON formatter for structured logging

Formats log entries as JSON objects
"""

import json
from typing import Optional

from fanout_logger.core.log_entry import LogEntry, format_timestamp
from fanout_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_context: bool = True,
        include_metadata: bool = True,
        include_trace: bool = False,
        indent: Optional[int] = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_context: Include context fields in output
            include_metadata: Include tags and source
            include_trace: Include the full error traceback, not just its repr
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_context = include_context
        self.include_metadata = include_metadata
        self.include_trace = include_trace
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": format_timestamp(entry.timestamp),
            "level": entry.level.label,
            "message": entry.message,
        }

        if self.include_context and entry.context:
            log_dict["context"] = dict(entry.context)

        if entry.error is not None:
            log_dict["error"] = {
                "type": type(entry.error).__name__,
                "message": str(entry.error),
            }
            if self.include_trace:
                log_dict["error"]["trace"] = entry.error_trace

        if self.include_metadata:
            if entry.tags:
                log_dict["tags"] = list(entry.tags)
            log_dict["source"] = entry.source

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
