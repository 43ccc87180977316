"""
Log entry data structure

An immutable snapshot of one logging event.
"""

import dataclasses
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping, Tuple

from fanout_logger.core.log_level import LogLevel

DEFAULT_SOURCE = "application"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(timestamp: datetime) -> str:
    """
    Render a timestamp as ISO-8601 UTC with millisecond precision.

    Example: 2024-05-01T12:30:45.123Z
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    text = timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Entries are never mutated after construction; enrichment such as
    formatting produces a new entry via with_message().

    Entries compare by value but are not hashable, since context values
    may be arbitrary objects.
    """

    __hash__ = None

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=utc_now)
    context: Mapping[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None
    tags: Tuple[str, ...] = ()
    source: str = DEFAULT_SOURCE

    def __post_init__(self):
        """Validate and freeze fields after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        object.__setattr__(self, "context", MappingProxyType(dict(self.context or {})))
        object.__setattr__(self, "tags", tuple(self.tags or ()))

    def with_message(self, message: str) -> "LogEntry":
        """Return a copy of this entry with the message replaced."""
        return dataclasses.replace(self, message=message)

    @property
    def error_trace(self) -> str:
        """
        Traceback text of the attached error, or an empty string.

        A non-exception value in the error slot is rendered with str().
        """
        if self.error is None:
            return ""
        if not isinstance(self.error, BaseException):
            return str(self.error)
        lines = traceback.format_exception(
            type(self.error), self.error, self.error.__traceback__
        )
        return "".join(lines).rstrip("\n")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": format_timestamp(self.timestamp),
            "context": dict(self.context),
            "error": repr(self.error) if self.error is not None else None,
            "tags": list(self.tags),
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        The error field is not restored.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        timestamp = data["timestamp"]
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        return cls(
            level=LogLevel[data["level"]],
            message=data["message"],
            timestamp=timestamp,
            context=data.get("context") or {},
            tags=tuple(data.get("tags") or ()),
            source=data.get("source", DEFAULT_SOURCE),
        )

    def __str__(self) -> str:
        """String representation."""
        return f"[{format_timestamp(self.timestamp)}] {self.level.name}: {self.message}"
