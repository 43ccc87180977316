"""Context-based filter"""

from typing import Any
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.filters.base_filter import BaseFilter

_ANY = object()


class ContextFilter(BaseFilter):
    """
    Filter log entries on a context key.

    Example:
        # Entries carrying any userId
        filter = ContextFilter("userId")

        # Entries for one tenant only
        filter = ContextFilter("tenant", "acme")

        # Everything except one tenant
        filter = ContextFilter("tenant", "acme", exclude=True)
    """

    def __init__(self, key: str, value: Any = _ANY, exclude: bool = False):
        self.key = key
        self.value = value
        self.exclude = exclude

    def should_log(self, entry: LogEntry) -> bool:
        if self.key not in entry.context:
            matches = False
        elif self.value is _ANY:
            matches = True
        else:
            matches = entry.context[self.key] == self.value
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        value = "<any>" if self.value is _ANY else repr(self.value)
        return f"ContextFilter(key='{self.key}', value={value}, exclude={self.exclude})"
