"""
Pattern-based filter over the rendered log line

Filters see the entry after formatting, so the text searched here is the
formatter's whole output: with the default formatter that is the timestamp
and level prefix, the message, the JSON context and any error traceback.
"""

import re
from typing import Iterable, List, Pattern, Union
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.filters.base_filter import BaseFilter

PatternLike = Union[str, Pattern]


class PatternFilter(BaseFilter):
    """
    Select entries whose rendered line matches any of a set of patterns.

    Because context is part of the rendered line, a pattern can catch a
    sensitive value whether it appears in the message or in the context.
    """

    def __init__(
        self,
        patterns: Union[PatternLike, Iterable[PatternLike]],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            patterns: One regular expression or several (strings or compiled);
                an entry matches when any of them is found in the rendered line
            exclude: If True, drop matching entries. If False, deliver only matching entries.
            case_sensitive: Applies to patterns given as strings

        Example:
            # Keep entries that rendered any context
            filter = PatternFilter(r"\\{.*\\}$")

            # Drop lines mentioning credentials, in message or context
            filter = PatternFilter(["password", "api[_-]?key"], exclude=True, case_sensitive=False)
        """
        if isinstance(patterns, (str, re.Pattern)):
            patterns = [patterns]
        flags = 0 if case_sensitive else re.IGNORECASE
        self.patterns: List[Pattern] = [
            re.compile(p, flags) if isinstance(p, str) else p for p in patterns
        ]
        if not self.patterns:
            raise ValueError("at least one pattern is required")
        self.exclude = exclude

    @classmethod
    def excluding(cls, *texts: str, case_sensitive: bool = True) -> "PatternFilter":
        """Build a filter dropping lines that contain any of the texts literally."""
        return cls([re.escape(text) for text in texts], exclude=True, case_sensitive=case_sensitive)

    def matches(self, line: str) -> bool:
        """Check a rendered line against the patterns."""
        return any(pattern.search(line) for pattern in self.patterns)

    def should_log(self, entry: LogEntry) -> bool:
        # entry.message holds the formatter's output, not the caller's text
        return self.matches(entry.message) != self.exclude

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        shown = ", ".join(repr(p.pattern) for p in self.patterns)
        return f"PatternFilter(patterns=[{shown}], mode={mode})"
