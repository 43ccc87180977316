"""
Callback-based filter

Filters log entries using custom callback functions
"""

from typing import Callable
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log entries using a custom callback function.

    Exceptions raised by the callback are not caught: a failing filter is a
    configuration error and surfaces from Logger.log().
    """

    def __init__(self, callback: Callable[[LogEntry], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEntry and returns bool.
                     Should return True to deliver the entry, False to discard it.

        Example:
            # Only entries tagged with a user
            filter = CallbackFilter(lambda entry: "userId" in entry.context)

            # Drop entries from a noisy source
            filter = CallbackFilter(lambda entry: entry.source != "healthcheck")
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, entry: LogEntry) -> bool:
        """
        Use callback to determine if entry should be delivered.

        Args:
            entry: Log entry to check

        Returns:
            Truthiness of the callback result
        """
        return bool(self.callback(entry))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
