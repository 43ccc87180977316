"""
Level-based filter

Filters log entries by level range or by an explicit set of levels
"""

from typing import Iterable, Optional, Union
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.log_level import LogLevel
from fanout_logger.filters.base_filter import BaseFilter

LevelLike = Union[LogLevel, str]


def _coerce(level: Optional[LevelLike]) -> Optional[LogLevel]:
    if level is None or isinstance(level, LogLevel):
        return level
    return LogLevel.from_string(level)


class LevelFilter(BaseFilter):
    """
    Filter log entries based on log level.

    Unlike the logger's minimum level, this runs after formatting and can
    also cap the maximum level or select individual levels.
    """

    def __init__(
        self,
        min_level: Optional[LevelLike] = None,
        max_level: Optional[LevelLike] = None,
        only: Optional[Iterable[LevelLike]] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.
            only: If given, deliver only these levels (combined with the range).

        Example:
            # Keep DEBUG and INFO out of an error sink
            filter = LevelFilter(min_level=LogLevel.WARN)

            # Only the chatty levels
            filter = LevelFilter(max_level="info")
        """
        self.min_level = _coerce(min_level)
        self.max_level = _coerce(max_level)
        self.only = frozenset(_coerce(level) for level in only) if only is not None else None

        if self.min_level is not None and self.max_level is not None and self.min_level > self.max_level:
            raise ValueError("min_level cannot exceed max_level")

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry's level passes the range and the level set.

        Args:
            entry: Log entry to check

        Returns:
            True if entry level is accepted, False otherwise
        """
        if self.min_level is not None and entry.level < self.min_level:
            return False

        if self.max_level is not None and entry.level > self.max_level:
            return False

        if self.only is not None and entry.level not in self.only:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        only = sorted(level.name for level in self.only) if self.only is not None else None
        return f"LevelFilter(min={self.min_level!s}, max={self.max_level!s}, only={only})"
