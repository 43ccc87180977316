"""
Base formatter interface

A formatter renders a LogEntry into the display string that replaces the
entry's message before filtering and delivery.
"""

from abc import ABC, abstractmethod
from fanout_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be used wherever a formatter function is expected."""
        return self.format(entry)
