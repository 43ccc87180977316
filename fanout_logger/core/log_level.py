"""
Log level enumeration

Levels are ordered by severity; the integer value is the priority used by
the level gate.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    DEBUG < INFO < WARN < ERROR < FATAL.
    """

    DEBUG = 0   # Debug information
    INFO = 1    # Informational messages
    WARN = 2    # Warning messages
    ERROR = 3   # Error messages
    FATAL = 4   # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). "warning" and
                "critical" are accepted as aliases of WARN and FATAL.

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def priority(self) -> int:
        """Gate priority of this level."""
        return int(self)

    @property
    def label(self) -> str:
        """Lower-case level name."""
        return self.name.lower()

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
