"""Console transport with per-level output streams"""

import json
import sys
from typing import Dict, Optional, TextIO

from fanout_logger.core.log_entry import LogEntry, format_timestamp
from fanout_logger.core.log_level import LogLevel
from fanout_logger.transports.base_transport import BaseTransport


class ConsoleTransport(BaseTransport):
    """
    Write logs to the console, routing each level through its own stream slot.

    Every level can be given a distinct stream. Unset levels collapse onto
    the two standard streams: DEBUG and INFO go to sys.stdout, WARN and
    above go to sys.stderr.
    """

    def __init__(self, colored: bool = False, streams: Optional[Dict[LogLevel, TextIO]] = None):
        """
        Initialize console transport.

        Args:
            colored: Use ANSI color codes
            streams: Per-level output streams, e.g. one stream per level for
                fully separated channels. Missing levels fall back to
                sys.stdout for DEBUG/INFO and sys.stderr for WARN and above.
        """
        self.colored = colored
        self._streams = dict(streams or {})

    def stream_for(self, level: LogLevel) -> TextIO:
        """Return the stream a level is routed to."""
        stream = self._streams.get(level)
        if stream is not None:
            return stream
        # Resolved at call time so redirected sys streams are honoured
        return sys.stdout if level < LogLevel.WARN else sys.stderr

    def render(self, entry: LogEntry) -> str:
        """Render an entry as a console line."""
        parts = [f"[{format_timestamp(entry.timestamp)}] {entry.level.name}: {entry.message}"]
        if entry.context:
            parts.append(json.dumps(dict(entry.context), default=str))
        if entry.level >= LogLevel.ERROR and entry.error is not None:
            parts.append(repr(entry.error))
        msg = " ".join(parts)
        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"
        return msg

    def write(self, entry: LogEntry):
        """Write log entry to its level's stream."""
        stream = self.stream_for(entry.level)
        stream.write(self.render(entry) + "\n")
        stream.flush()

    def flush(self):
        """Flush every stream this transport writes to."""
        seen = set()
        for level in LogLevel:
            stream = self.stream_for(level)
            if id(stream) not in seen:
                seen.add(id(stream))
                stream.flush()
